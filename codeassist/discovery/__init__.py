"""Project file discovery and primary file selection."""

from codeassist.discovery.scanner import ProjectScanner
from codeassist.discovery.selector import select_primary_files

__all__ = [
    "ProjectScanner",
    "select_primary_files",
]

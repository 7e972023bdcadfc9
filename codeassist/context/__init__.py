"""Context assembly: global supporting files and per-file readonly sets."""

from codeassist.context.globals import baseline_for, resolve_global_files
from codeassist.context.readonly import ReadonlySetBuilder

__all__ = [
    "ReadonlySetBuilder",
    "baseline_for",
    "resolve_global_files",
]

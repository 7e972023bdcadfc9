"""Project file scanner.

Walks a project directory and lists the source and test files of one
language ecosystem. Build output, fetched dependencies, private assets
and hidden entries are skipped, and excluded directories are pruned
rather than walked. Paths are returned relative to the project root
with forward-slash separators.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class ProjectScanner:
    """Discovers project files by extension under a root directory.

    Directories that cannot be read are skipped rather than aborting the
    walk, so a partially readable tree still yields its readable files.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        extensions: list[str] | None = None,
        excluded_prefixes: list[str] | None = None,
    ) -> None:
        self._root = Path(root) if root is not None else Path.cwd()
        self._extensions = tuple(extensions or [])
        self._excluded = tuple(excluded_prefixes or [])

    def _is_excluded(self, rel_path: str) -> bool:
        return any(rel_path.startswith(prefix) for prefix in self._excluded)

    def _matches_extension(self, name: str) -> bool:
        return bool(self._extensions) and name.endswith(self._extensions)

    def scan(self) -> list[str]:
        """Walk the project and return the sorted list of project files."""
        if not self._root.is_dir():
            logger.warning("Project directory does not exist: %s", self._root)
            return []

        files: list[str] = []

        # os.walk ignores unreadable directories unless onerror is given
        for dirpath, dirnames, filenames in os.walk(self._root):
            rel_dir = Path(dirpath).relative_to(self._root)
            dirnames[:] = [
                d for d in dirnames
                if not d.startswith(".") and not self._is_excluded(f"{(rel_dir / d).as_posix()}/")
            ]
            for name in filenames:
                if name.startswith(".") or not self._matches_extension(name):
                    continue

                rel = (rel_dir / name).as_posix()
                if self._is_excluded(rel):
                    continue

                files.append(rel)

        files.sort()
        logger.info("Discovered %d project files in %s", len(files), self._root)
        return files

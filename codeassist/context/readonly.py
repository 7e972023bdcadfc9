"""Readonly set builder.

For each primary file, infers which other project files it depends on
and records them as read-only context for the editing command. Two modes:

- generic: references are read from the primary file itself.
- test generation: each primary test file is resolved to its
  implementation file, which is added along with the files *it*
  references.

Both modes merge into any entries already present, so running a mode
twice over the same context is a no-op the second time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from codeassist.references.extractor import extract_references
from codeassist.references.mapper import namespace_to_path
from codeassist.schemas.context import TaskContext
from codeassist.schemas.profile import LanguageProfile

logger = logging.getLogger(__name__)


class ReadonlySetBuilder:
    """Builds the per-primary-file readonly sets of a TaskContext.

    Per-file work only reads that file and the already-final project file
    list, so it can fan out over ``max_workers`` threads. Results are
    always merged by the calling thread, in ``primary_files`` order.
    """

    def __init__(
        self,
        profile: LanguageProfile,
        root: str | Path | None = None,
        max_workers: int = 1,
    ) -> None:
        self._profile = profile
        self._root = Path(root) if root is not None else Path.cwd()
        self._max_workers = max(1, max_workers)

    # ── Per-file helpers ─────────────────────────────────────────

    def _read(self, rel_path: str) -> str | None:
        try:
            return (self._root / rel_path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning("Could not read %s: %s", rel_path, e)
            return None

    def related_files(
        self,
        rel_path: str,
        project_files: set[str] | list[str],
        exclude: set[str] | None = None,
    ) -> list[str]:
        """Return project files referenced by ``rel_path``, deduplicated.

        Candidates equal to ``rel_path`` or listed in ``exclude`` are
        dropped, as is any candidate that is not a project file.
        Unreadable files yield an empty list.
        """
        content = self._read(rel_path)
        if content is None:
            return []

        references = extract_references(
            content,
            declaration_keyword=self._profile.declaration_keyword,
            reference_keyword=self._profile.reference_keyword,
        )
        skip = {rel_path} | (exclude or set())

        related: list[str] = []
        for reference in references:
            candidate = namespace_to_path(
                reference,
                source_dir=self._profile.source_dir,
                extension=self._profile.source_extension,
            )
            if candidate in skip or candidate not in project_files:
                continue
            if candidate not in related:
                related.append(candidate)
        return related

    def source_path_for(self, test_path: str) -> str:
        """Map a test file path to its implementation file path.

        ``test/foo/bar_test.exs`` → ``lib/foo/bar.ex``. Paths outside the
        test directory or without the test suffix keep those parts as-is.
        """
        test_prefix = f"{self._profile.test_dir}/"
        path = test_path
        if path.startswith(test_prefix):
            path = f"{self._profile.source_dir}/{path[len(test_prefix):]}"
        if path.endswith(self._profile.test_suffix):
            path = path[: -len(self._profile.test_suffix)] + self._profile.source_extension
        return path

    def _sources_for_test(self, test_path: str, project_files: set[str]) -> list[str]:
        source_path = self.source_path_for(test_path)
        if not (self._root / source_path).is_file():
            logger.debug("No implementation file %s for %s", source_path, test_path)
            return []
        return [source_path, *self.related_files(source_path, project_files, {test_path})]

    def _map_primary(self, context: TaskContext, fn: Callable[[str], list[str]]) -> list[list[str]]:
        if self._max_workers == 1 or len(context.primary_files) < 2:
            return [fn(path) for path in context.primary_files]
        with ThreadPoolExecutor(max_workers=self._max_workers) as ex:
            return list(ex.map(fn, context.primary_files))

    @staticmethod
    def _merge(
        existing: dict[str, list[str]],
        primary_files: list[str],
        found: list[list[str]],
    ) -> dict[str, list[str]]:
        merged = dict(existing)
        for primary, files in zip(primary_files, found):
            combined = sorted(set(merged.get(primary, [])) | set(files))
            if combined:
                merged[primary] = combined
            else:
                merged.pop(primary, None)
        return merged

    # ── Modes ────────────────────────────────────────────────────

    def build(self, context: TaskContext) -> TaskContext:
        """Generic mode: attach the files each primary file references."""
        project_files = set(context.project_files)
        found = self._map_primary(
            context, lambda path: self.related_files(path, project_files)
        )
        readonly = self._merge(context.readonly_files, context.primary_files, found)
        logger.info(
            "Readonly sets built for %d of %d primary files",
            sum(1 for p in context.primary_files if p in readonly),
            len(context.primary_files),
        )
        return context.model_copy(update={"readonly_files": readonly})

    def build_for_tests(self, context: TaskContext) -> TaskContext:
        """Test-generation mode: attach each test's implementation file and its references.

        The implementation file is checked on disk, independent of the
        project file list. Test files without one keep whatever entry
        they already had.
        """
        project_files = set(context.project_files)
        found = self._map_primary(
            context, lambda path: self._sources_for_test(path, project_files)
        )
        readonly = self._merge(context.readonly_files, context.primary_files, found)
        return context.model_copy(update={"readonly_files": readonly})

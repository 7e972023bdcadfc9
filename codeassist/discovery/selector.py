"""Primary file selection."""

from __future__ import annotations


def select_primary_files(project_files: list[str], filter: str | None) -> list[str]:
    """Narrow the project files to those addressed by this invocation.

    The filter is a literal, case-sensitive substring test against the
    whole relative path; glob and regex characters have no special
    meaning. An absent or empty filter selects every project file.
    Order of ``project_files`` is preserved.
    """
    if not filter:
        return list(project_files)
    return [path for path in project_files if filter in path]

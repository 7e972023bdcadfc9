"""Global readonly file resolution.

Every language and task carries a fixed list of supporting files
(style guides, shared test helpers) that are attached to every command.
The paths come from configuration and are not checked on disk.
"""

from __future__ import annotations

from codeassist.schemas.context import Task, TaskContext
from codeassist.schemas.profile import LanguageProfile


def baseline_for(profile: LanguageProfile, task: Task | None) -> list[str]:
    """Return the language baseline plus the baseline of ``task``, if configured."""
    files = list(profile.baseline_files)
    task_profile = profile.task_profile(task)
    if task_profile is not None:
        files.extend(task_profile.baseline_files)
    return files


def resolve_global_files(context: TaskContext, baseline: list[str]) -> TaskContext:
    """Union ``baseline`` into the context's global readonly files, sorted."""
    merged = sorted(set(context.global_readonly_files) | set(baseline))
    return context.model_copy(update={"global_readonly_files": merged})

"""Context pipeline.

Runs the stages that turn a front-end request into one command per
primary file:

    discover → select → global files → readonly sets
    → [test sources] → [default prompts] → render

Each stage takes a TaskContext and returns a new one. Language and task
strings are resolved to closed enums up front; an unsupported language
skips every analysis stage and an unsupported task skips the
task-specific ones, leaving the context otherwise unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from codeassist.commands.renderer import CommandRenderer
from codeassist.context.globals import baseline_for, resolve_global_files
from codeassist.context.readonly import ReadonlySetBuilder
from codeassist.discovery.scanner import ProjectScanner
from codeassist.discovery.selector import select_primary_files
from codeassist.prompts import apply_default_prompts
from codeassist.registry import get_profile, load_profiles
from codeassist.schemas.context import Language, TaskContext, parse_language, parse_task
from codeassist.schemas.profile import LanguageProfile

logger = logging.getLogger(__name__)

Stage = Callable[[TaskContext], TaskContext]


class Pipeline:
    """Assembles readonly context and editing commands for a project.

    Args:
        root: Project root; defaults to the current working directory.
        profiles: Language profiles; defaults to the packaged profiles.toml.
        renderer: Command renderer; defaults to the aider renderer.
        max_workers: Threads used for per-file reference extraction.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        profiles: dict[Language, LanguageProfile] | None = None,
        renderer: CommandRenderer | None = None,
        max_workers: int = 1,
    ) -> None:
        self._root = Path(root) if root is not None else Path.cwd()
        self._profiles = profiles if profiles is not None else load_profiles()
        self._renderer = renderer or CommandRenderer()
        self._max_workers = max_workers

    @property
    def profiles(self) -> dict[Language, LanguageProfile]:
        return self._profiles

    def stages(self, context: TaskContext) -> list[Stage]:
        """Return the stages that apply to this context's language and task."""
        profile = get_profile(self._profiles, parse_language(context.language))
        if profile is None:
            logger.warning(
                "Unsupported language '%s'; rendering commands only", context.language
            )
            return [self._renderer.render]

        task = parse_task(context.task)
        task_profile = profile.task_profile(task)
        if task_profile is None:
            logger.warning("Unsupported task '%s' for %s", context.task, profile.language)

        scanner = ProjectScanner(self._root, profile.extensions, profile.excluded_prefixes)
        builder = ReadonlySetBuilder(profile, self._root, self._max_workers)
        baseline = baseline_for(profile, task)

        stages: list[Stage] = [
            lambda ctx: ctx.model_copy(update={"project_files": scanner.scan()}),
            lambda ctx: ctx.model_copy(
                update={"primary_files": select_primary_files(ctx.project_files, ctx.filter)}
            ),
            lambda ctx: resolve_global_files(ctx, baseline),
            builder.build,
        ]
        if task_profile is not None and task_profile.resolve_sources:
            stages.append(builder.build_for_tests)
        if task_profile is not None and task_profile.default_prompts:
            stages.append(lambda ctx: apply_default_prompts(ctx, profile))
        stages.append(self._renderer.render)
        return stages

    def run(self, context: TaskContext) -> TaskContext:
        """Fold the context through every applicable stage."""
        for stage in self.stages(context):
            context = stage(context)
        logger.info(
            "Pipeline finished: %d project files, %d primary files, %d commands",
            len(context.project_files),
            len(context.primary_files),
            len(context.commands),
        )
        return context

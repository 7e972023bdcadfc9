"""Language and task profile schemas.

Profiles are loaded from config/profiles.toml and describe the fixed,
per-language conventions the pipeline relies on: which files count as
project files, how module names map to paths, where tests live, and
which supporting files every command should read.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from codeassist.schemas.context import Language, Task


class TaskProfile(BaseModel):
    """Fixed settings for one task of a language."""

    baseline_files: list[str] = Field(
        default_factory=list,
        description="Supporting files always attached for this task",
    )
    resolve_sources: bool = Field(
        default=False,
        description="Resolve each primary test file to its implementation file",
    )
    default_prompts: bool = Field(
        default=False,
        description="Fill empty prompts from the task's prompt templates",
    )


class LanguageProfile(BaseModel):
    """Naming and layout conventions for one language ecosystem."""

    language: Language = Field(description="Language this profile describes")
    extensions: list[str] = Field(
        min_length=1, description="File extensions treated as project files"
    )
    excluded_prefixes: list[str] = Field(
        default_factory=list,
        description="Path prefixes for build output, dependencies and private assets",
    )
    baseline_files: list[str] = Field(
        default_factory=list,
        description="Supporting files attached for every task of this language",
    )
    source_dir: str = Field(default="lib", description="Directory holding source modules")
    source_extension: str = Field(default=".ex", description="Extension of source modules")
    test_dir: str = Field(default="test", description="Directory holding test files")
    test_suffix: str = Field(
        default="_test.exs", description="Filename suffix identifying test files"
    )
    declaration_keyword: str = Field(
        default="defmodule", description="Keyword that declares a top-level module"
    )
    reference_keyword: str = Field(
        default="alias", description="Keyword that references another module"
    )
    test_command: str = Field(
        default="", description="Command used to run a single test file"
    )
    prompt_variables: dict[str, str] = Field(
        default_factory=dict,
        description="Variables rendered into the default prompt templates",
    )
    tasks: dict[Task, TaskProfile] = Field(
        default_factory=dict, description="Per-task settings"
    )

    def task_profile(self, task: Task | None) -> TaskProfile | None:
        """Return the settings for a task, or None if it is not configured."""
        if task is None:
            return None
        return self.tasks.get(task)

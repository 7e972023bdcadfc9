"""codeassist schema definitions.

Pydantic v2 models for the pipeline context, language/task profiles,
and command execution results.
"""

from codeassist.schemas.context import (
    Language,
    Task,
    TaskContext,
    parse_language,
    parse_task,
)
from codeassist.schemas.execution import CommandResult
from codeassist.schemas.profile import LanguageProfile, TaskProfile

__all__ = [
    "CommandResult",
    "Language",
    "LanguageProfile",
    "Task",
    "TaskContext",
    "TaskProfile",
    "parse_language",
    "parse_task",
]

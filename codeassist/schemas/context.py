"""Pipeline context schemas.

Defines the supported languages and tasks, and the TaskContext record
threaded through every pipeline stage. Stages never mutate a context;
they return a copy produced with ``model_copy(update=...)``.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Language(StrEnum):
    """Languages the pipeline knows how to analyse."""

    ELIXIR = "Elixir"


class Task(StrEnum):
    """Tasks a front end can request.

    The value is the label the user picks, so front ends can pass the
    raw string straight into a TaskContext.
    """

    REFACTOR = "Refactor code"
    GENERATE_TESTS = "Generate tests"


def parse_language(value: str | None) -> Language | None:
    """Return the Language for a front-end string, or None if unsupported."""
    if not value:
        return None
    for member in Language:
        if member.value.lower() == value.strip().lower():
            return member
    return None


def parse_task(value: str | None) -> Task | None:
    """Return the Task for a front-end string, or None if unsupported."""
    if not value:
        return None
    for member in Task:
        if member.value.lower() == value.strip().lower():
            return member
    return None


class TaskContext(BaseModel):
    """The record threaded through the pipeline.

    Created from the front end's request, enriched by each stage, and
    finally consumed by the command renderer and executor.
    """

    model_config = ConfigDict(frozen=True)

    language: str = Field(default="", description="Language label chosen by the user")
    task: str = Field(default="", description="Task label chosen by the user")
    filter: str | None = Field(
        default=None, description="Literal substring selecting the primary files"
    )
    project_files: list[str] = Field(
        default_factory=list, description="Sorted project-relative source and test files"
    )
    primary_files: list[str] = Field(
        default_factory=list, description="Files addressed by this invocation"
    )
    global_readonly_files: list[str] = Field(
        default_factory=list,
        description="Supporting files attached to every command, sorted",
    )
    readonly_files: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Primary file → sorted related files given as read-only context",
    )
    positive_prompt: str | None = Field(
        default=None, description="What the editing tool should do"
    )
    negative_prompt: str | None = Field(
        default=None, description="What the editing tool should avoid"
    )
    commands: dict[str, str] = Field(
        default_factory=dict, description="Primary file → rendered command string"
    )

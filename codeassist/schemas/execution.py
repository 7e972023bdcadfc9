"""Command execution result schema."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """Captured outcome of running one shell command."""

    command: str = Field(description="The command string as executed")
    output: str = Field(default="", description="Combined stdout and stderr")
    exit_code: int = Field(default=0, description="Process exit status")

    @property
    def passed(self) -> bool:
        return self.exit_code == 0

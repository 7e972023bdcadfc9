"""Command rendering and execution for the external editing tool."""

from codeassist.commands.executor import CommandExecutor, follow_up_command
from codeassist.commands.renderer import CommandRenderer, build_message, escape_message

__all__ = [
    "CommandExecutor",
    "CommandRenderer",
    "build_message",
    "escape_message",
    "follow_up_command",
]

"""Command rendering for the external code-editing tool.

Turns a fully populated TaskContext into one command string per primary
file. Purely textual; nothing is executed here.
"""

from __future__ import annotations

import logging

from codeassist.schemas.context import TaskContext

logger = logging.getLogger(__name__)

_DEFAULT_EXECUTABLE = "aider"


def escape_message(text: str) -> str:
    """Quote a message for the command line.

    Backslashes are doubled before quotes are escaped, otherwise the
    backslashes inserted for quotes would be doubled too.
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def build_message(positive: str | None, negative: str | None) -> str | None:
    """Build the labelled message text, or None when both prompts are blank."""
    positive = (positive or "").strip()
    negative = (negative or "").strip()

    if positive and negative:
        return f"Positive Prompt: {positive}\n\n\nNegative Prompt: {negative}\n\n"
    if positive:
        return f"Positive Prompt: {positive}\n\n"
    if negative:
        return f"Negative Prompt: {negative}\n\n"
    return None


class CommandRenderer:
    """Renders ``<executable> --read ... --file <primary> [--message "..."]``.

    Read flags list the global readonly files first, then the primary
    file's own readonly set, each in sorted order.
    """

    def __init__(
        self,
        executable: str = _DEFAULT_EXECUTABLE,
        read_flag: str = "--read",
        file_flag: str = "--file",
        message_flag: str = "--message",
    ) -> None:
        self._executable = executable
        self._read_flag = read_flag
        self._file_flag = file_flag
        self._message_flag = message_flag

    def command_for(self, context: TaskContext, primary_file: str) -> str:
        """Render the command string for a single primary file."""
        parts = [self._executable]
        parts.extend(f"{self._read_flag} {path}" for path in context.global_readonly_files)
        parts.extend(
            f"{self._read_flag} {path}"
            for path in context.readonly_files.get(primary_file, [])
        )
        parts.append(f"{self._file_flag} {primary_file}")

        message = build_message(context.positive_prompt, context.negative_prompt)
        if message is not None:
            parts.append(f"{self._message_flag} {escape_message(message)}")

        return " ".join(parts)

    def render(self, context: TaskContext) -> TaskContext:
        """Return a context whose ``commands`` hold one entry per primary file."""
        commands = {
            primary_file: self.command_for(context, primary_file)
            for primary_file in context.primary_files
        }

        logger.info("Rendered %d commands", len(context.primary_files))
        return context.model_copy(update={"commands": commands})

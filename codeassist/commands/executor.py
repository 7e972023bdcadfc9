"""Command execution for rendered commands.

Runs command strings via subprocess with a timeout and captures their
output. Failures to start or finish a process are reported as a failed
CommandResult, never raised.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from codeassist.schemas.context import (
    Language,
    Task,
    TaskContext,
    parse_language,
    parse_task,
)
from codeassist.schemas.execution import CommandResult
from codeassist.schemas.profile import LanguageProfile

logger = logging.getLogger(__name__)

_DEFAULT_TIMEOUT = 300


class CommandExecutor:
    """Runs command strings in a working directory.

    The command string is split with shell-like rules and run without a
    shell. ``run`` waits and captures output; ``spawn`` starts the process
    and returns immediately.
    """

    def __init__(self, cwd: str | Path | None = None, timeout: int = _DEFAULT_TIMEOUT) -> None:
        self._cwd = Path(cwd) if cwd is not None else Path.cwd()
        self._timeout = timeout

    def run(self, command: str) -> CommandResult:
        """Run a command and capture its combined output and exit code."""
        try:
            args = shlex.split(command)
            if not args:
                raise ValueError("empty command")
            result = subprocess.run(
                args,
                cwd=str(self._cwd),
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired:
            msg = f"Command timed out after {self._timeout} seconds"
            logger.warning("%s: %s", msg, command)
            return CommandResult(command=command, output=msg, exit_code=124)
        except FileNotFoundError:
            msg = f"Command not found: {command}"
            logger.error(msg)
            return CommandResult(command=command, output=msg, exit_code=127)
        except (OSError, ValueError) as e:
            msg = f"Command error: {e}"
            logger.error(msg)
            return CommandResult(command=command, output=msg, exit_code=1)

        if result.returncode == 0:
            logger.info("Command succeeded: %s", args[0])
        else:
            logger.warning("Command failed (exit code %d): %s", result.returncode, args[0])

        return CommandResult(
            command=command,
            output=result.stdout + result.stderr,
            exit_code=result.returncode,
        )

    def spawn(self, command: str) -> subprocess.Popen:
        """Start a command in its own session without waiting for it.

        Raises ValueError for a command that splits into no arguments.
        """
        args = shlex.split(command)
        if not args:
            raise ValueError(f"Cannot spawn an empty command: {command!r}")
        logger.info("Spawning: %s", args[0])
        return subprocess.Popen(args, cwd=str(self._cwd), start_new_session=True)

    def follow_up(
        self,
        primary_file: str,
        context: TaskContext,
        profiles: dict[Language, LanguageProfile],
    ) -> CommandResult | None:
        """Run the language's test command on a freshly generated test file.

        Only applies to the ``Generate tests`` task when ``primary_file``
        is a test file. Returns None when there is nothing to run.
        """
        command = follow_up_command(primary_file, context, profiles)
        if command is None:
            return None
        return self.run(command)


def follow_up_command(
    primary_file: str,
    context: TaskContext,
    profiles: dict[Language, LanguageProfile],
) -> str | None:
    """Return the test command to run after editing ``primary_file``, if any."""
    language = parse_language(context.language)
    profile = profiles.get(language) if language is not None else None
    if profile is None or not profile.test_command:
        return None
    if parse_task(context.task) is not Task.GENERATE_TESTS:
        return None
    if not primary_file.endswith(profile.test_suffix):
        return None
    return f"{profile.test_command} {shlex.quote(primary_file)}"

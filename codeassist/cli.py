"""codeassist CLI — Typer + Rich terminal interface.

Commands: run, languages.
Builds editing commands for the selected project files and optionally
executes them.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from codeassist import __version__
from codeassist.commands.executor import CommandExecutor
from codeassist.pipeline import Pipeline
from codeassist.registry import load_profiles
from codeassist.schemas.context import Language, Task, TaskContext

console = Console()

app = typer.Typer(
    name="codeassist",
    help="Assemble read-only context and editing commands for project files.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ───────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"codeassist {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Log pipeline progress to stderr.",
    ),
) -> None:
    """codeassist — context assembly for external code-editing commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
    )


# ── Helpers ──────────────────────────────────────────────────────


def _load_profiles():
    """Load language profiles, exit on error."""
    try:
        return load_profiles()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading profiles:[/red] {e}")
        raise typer.Exit(1) from None


def _display_request_panel(context: TaskContext) -> None:
    """Show a summary panel for the request being processed."""
    info = Text()
    info.append("Language: ", style="bold cyan")
    info.append(context.language)
    info.append("\n")
    info.append("Task: ", style="bold cyan")
    info.append(context.task)
    info.append("\n")
    info.append("Prompt: ", style="bold cyan")
    info.append((context.positive_prompt or "").strip() or "None")
    info.append("\n")
    info.append("To Avoid: ", style="bold cyan")
    info.append((context.negative_prompt or "").strip() or "None")
    info.append("\n")
    info.append("Filter: ", style="bold cyan")
    info.append(context.filter or "None")

    console.print(Panel(info, title="[bold]Request Summary[/bold]", border_style="blue"))


def _display_commands(context: TaskContext) -> None:
    """Show the rendered command for every primary file."""
    if not context.commands:
        console.print("[yellow]No primary files matched.[/yellow]")
        return

    table = Table(title="Commands", show_lines=True)
    table.add_column("Primary File", style="bold cyan")
    table.add_column("Read-only", justify="right")
    table.add_column("Command")

    for primary_file, command in sorted(context.commands.items()):
        readonly = context.readonly_files.get(primary_file, [])
        table.add_row(
            Text(primary_file),
            str(len(context.global_readonly_files) + len(readonly)),
            Text(command),
        )

    console.print(table)
    console.print(
        f"\n[dim]{len(context.project_files)} project files, "
        f"{len(context.primary_files)} selected[/dim]"
    )


# ── codeassist run ───────────────────────────────────────────────


@app.command()
def run(
    language: str = typer.Option(
        Language.ELIXIR.value, "--language", "-l", help="Project language",
    ),
    task: str = typer.Option(
        Task.REFACTOR.value, "--task", "-t",
        help="Task: 'Refactor code' or 'Generate tests'",
    ),
    filter: str = typer.Option(
        "", "--filter", "-f", help="Literal substring selecting primary files",
    ),
    prompt: str = typer.Option(
        "", "--prompt", "-p", help="What the editing tool should do",
    ),
    avoid: str = typer.Option(
        "", "--avoid", "-a", help="What the editing tool should avoid",
    ),
    root: Path = typer.Option(
        Path("."), "--root", "-r", help="Project root directory",
        exists=True, file_okay=False, dir_okay=True,
    ),
    workers: int = typer.Option(
        1, "--workers", "-w", min=1, help="Threads used for reference extraction",
    ),
    execute: bool = typer.Option(
        False, "--execute", "-x", help="Run each command, then its follow-up tests",
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the resulting context as JSON",
    ),
) -> None:
    """Build one editing command per selected project file."""
    profiles = _load_profiles()
    request = TaskContext(
        language=language,
        task=task,
        filter=filter or None,
        positive_prompt=prompt or None,
        negative_prompt=avoid or None,
    )

    pipeline = Pipeline(root=root, profiles=profiles, max_workers=workers)
    result = pipeline.run(request)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
    else:
        _display_request_panel(result)
        _display_commands(result)

    if not execute:
        return

    executor = CommandExecutor(cwd=root)
    failures = 0
    for primary_file, command in sorted(result.commands.items()):
        console.print(f"\n[bold]▸ {primary_file}[/bold]", highlight=False)
        outcome = executor.run(command)
        if not outcome.passed:
            failures += 1
            console.print(f"[red]✗ exit code {outcome.exit_code}[/red]")
            console.print(Text(outcome.output))
            continue

        console.print("[green]✓ command finished[/green]")
        follow_up = executor.follow_up(primary_file, result, profiles)
        if follow_up is None:
            continue
        console.print(Text(follow_up.output))
        if not follow_up.passed:
            failures += 1
            console.print(f"[red]✗ tests failed (exit code {follow_up.exit_code})[/red]")

    if failures:
        raise typer.Exit(1)


# ── codeassist languages ─────────────────────────────────────────


@app.command()
def languages() -> None:
    """Show supported languages, their tasks and baseline files."""
    profiles = _load_profiles()

    table = Table(title="Supported Languages", show_lines=True)
    table.add_column("Language", style="bold cyan")
    table.add_column("Extensions", style="dim")
    table.add_column("Task")
    table.add_column("Baseline Files")

    for language, profile in sorted(profiles.items()):
        for task, task_profile in profile.tasks.items():
            files = [*profile.baseline_files, *task_profile.baseline_files]
            table.add_row(
                language.value,
                ", ".join(profile.extensions),
                task.value,
                Text("\n".join(files) or "-"),
            )

    console.print(table)
    console.print(f"\n[dim]{len(profiles)} languages configured[/dim]")

"""CLI interface for daytodo using Typer.

Usage:
    daytodo                 # Edit today's list interactively
    daytodo list            # Show today's list
    daytodo add buy milk    # Add a todo
    daytodo add + 3 errands # Add a todo with three subtasks
    daytodo toggle 2        # Mark #2 done/undone
    daytodo delete 2        # Delete #2 (and its subtasks)

The CLI is structured as:
- app: Main Typer application
- commands/: Command groups (todo, config, session)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from typing import Optional

import typer

from daytodo import __version__
from daytodo.interfaces.cli.commands import config, session, todo
from daytodo.interfaces.cli.common import DayOption, DirOption, get_repository, parse_day

# Create the main Typer application
app = typer.Typer(
    name="daytodo",
    help="Plain-text daily todo lists with subtasks",
    add_completion=False,
    invoke_without_command=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"daytodo version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """daytodo - one plain-text todo file per day.

    Run without a command to edit today's list interactively.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        session.run_session()


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(todo.app, name="todo")
app.add_typer(config.app, name="config")
app.command("session")(session.session)


# =============================================================================
# Top-Level Shortcuts for Common Commands
# =============================================================================


@app.command("list")
def list_todos(day: DayOption = None, data_dir: DirOption = None) -> None:
    """Show the list (shortcut for 'todo list')."""
    todo.list_todos(day=day, data_dir=data_dir)


@app.command("add")
def add(
    text: list[str] = typer.Argument(..., help="Task text; '+ <n> <label>' creates n subtasks"),
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Add a todo (shortcut for 'todo add')."""
    todo.add(text=text, day=day, data_dir=data_dir)


@app.command("toggle")
def toggle(
    number: int = typer.Argument(..., help="Task number as shown by 'list'"),
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Mark done/undone (shortcut for 'todo toggle')."""
    todo.toggle(number=number, day=day, data_dir=data_dir)


@app.command("delete")
def delete(
    number: int = typer.Argument(..., help="Task number as shown by 'list'"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Delete a todo (shortcut for 'todo delete')."""
    todo.delete(number=number, yes=yes, day=day, data_dir=data_dir)


@app.command("stats")
def stats(day: DayOption = None, data_dir: DirOption = None) -> None:
    """Show completion counts (shortcut for 'todo stats')."""
    todo.stats(day=day, data_dir=data_dir)


@app.command("path")
def path(day: DayOption = None, data_dir: DirOption = None) -> None:
    """Print the file a day is stored in."""
    typer.echo(str(get_repository(data_dir).path_for(parse_day(day))))


@app.command("days")
def days(data_dir: DirOption = None) -> None:
    """List the days that have a todo file."""
    found = get_repository(data_dir).list_days()
    if not found:
        typer.echo("No day files yet.")
        return
    for day in found:
        typer.echo(day.isoformat())


__all__ = ["app"]

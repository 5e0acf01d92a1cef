"""Shared utilities for daytodo CLI commands.

This module provides common utilities used across CLI commands:
- Day and data directory options
- Opening and saving a day session (fatal errors exit with code 1)
- Formatted output helpers (error, success)
- Rendering tasks and events for display
"""

from datetime import date
from typing import Annotated, Optional

import typer

from daytodo.application import DaySession, get_day_stats, open_day, save_day
from daytodo.domain.shared import Err
from daytodo.domain.todo import (
    DaySaved,
    DomainEvent,
    TaskAdded,
    TaskDeleted,
    TaskStore,
    TaskToggled,
)
from daytodo.global_config import (
    get_settings,
    resolve_data_dir,
    resolve_timezone,
    today,
)
from daytodo.infrastructure.storage import DayFileRepository

# Reusable options for CLI commands
# Usage: def my_command(day: DayOption = None, data_dir: DirOption = None) -> None:
DayOption = Annotated[Optional[str], typer.Option(
    "--day",
    help="Day to open as YYYY-MM-DD (default: today)",
)]
DirOption = Annotated[Optional[str], typer.Option(
    "--dir",
    "-d",
    help="Directory holding day files (or set DAYTODO_DIR env var)",
    envvar="DAYTODO_DIR",
)]


def parse_day(raw: str | None) -> date:
    """Parse a --day value, defaulting to today in the session timezone.

    Raises:
        typer.Exit: If the value is not an ISO date.
    """
    if raw is None:
        return today(resolve_timezone(get_settings()))
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        print_error(f"Invalid day {raw!r}, expected YYYY-MM-DD.")
        raise typer.Exit(1)


def get_repository(data_dir: str | None = None) -> DayFileRepository:
    return DayFileRepository(resolve_data_dir(get_settings(), data_dir))


def open_session(day: str | None, data_dir: str | None) -> DaySession:
    """Open the requested day or exit.

    A day file that cannot be read or decoded ends the command: editing on
    top of a partially loaded file would lose the lines that failed.

    Raises:
        typer.Exit: If the day file is unreadable or corrupt.
    """
    settings = get_settings()
    result = open_day(
        get_repository(data_dir),
        parse_day(day),
        resolve_timezone(settings),
        with_header=settings.with_header,
    )
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def finish_session(session: DaySession) -> DaySaved:
    """Save the session or exit with an error.

    Raises:
        typer.Exit: If the day file cannot be written.
    """
    result = save_day(session)
    if isinstance(result, Err):
        print_error(result.error)
        raise typer.Exit(1)
    return result.value


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_store(store: TaskStore) -> None:
    """Print the numbered task list, done tasks in green."""
    lines = store.render()
    if len(store) == 0:
        typer.echo(lines[0])
        return
    for line, record in zip(lines, store):
        if record.done:
            line = typer.style(line, fg=typer.colors.GREEN)
        typer.echo(line)


def format_progress(session: DaySession) -> str:
    stats = get_day_stats(session)
    return (
        f"{session.day.isoformat()}: {stats.done}/{stats.total} done "
        f"({stats.progress_percent}%)"
    )


def format_event(event: DomainEvent) -> str:
    """One-line description of a domain event for the user."""
    if isinstance(event, TaskAdded):
        suffix = f" with {event.subtask_count} subtasks" if event.subtask_count else ""
        return f"Added #{event.position}: {event.text}{suffix}"
    if isinstance(event, TaskToggled):
        state = "done" if event.done else "not done"
        line = f"Marked #{event.position} {state}: {event.text}"
        if event.parent_done is not None:
            line += f" (group {'complete' if event.parent_done else 'open'})"
        return line
    if isinstance(event, TaskDeleted):
        extra = f" and {event.removed - 1} subtasks" if event.removed > 1 else ""
        return f"Deleted: {event.text}{extra}"
    if isinstance(event, DaySaved):
        return f"Saved {event.records} tasks to {event.path}"
    return type(event).__name__


__all__ = [
    "DayOption",
    "DirOption",
    "parse_day",
    "get_repository",
    "open_session",
    "finish_session",
    "print_error",
    "print_success",
    "print_store",
    "format_progress",
    "format_event",
]

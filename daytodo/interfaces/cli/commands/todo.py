"""One-shot todo commands.

Each command loads a day file, applies a single change and saves it,
for scripting and quick edits without the interactive loop.
"""

import typer

from daytodo.application import add_task, delete_task, get_day_stats, toggle_task
from daytodo.domain.shared import Err
from daytodo.interfaces.cli.common import (
    DayOption,
    DirOption,
    finish_session,
    format_event,
    format_progress,
    open_session,
    print_error,
    print_store,
    print_success,
)

app = typer.Typer(help="Todo list commands")


# =============================================================================
# Commands
# =============================================================================


@app.command("list")
def list_todos(
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Show the numbered todo list of a day."""
    session = open_session(day, data_dir)
    typer.echo(format_progress(session))
    print_store(session.store)


@app.command("add")
def add(
    text: list[str] = typer.Argument(..., help="Task text; '+ <n> <label>' creates n subtasks"),
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Add a todo.

    Example:
        daytodo add buy milk
        daytodo add + 3 groceries
    """
    task_text = " ".join(text).strip()
    if not task_text:
        print_error("Task text required.")
        raise typer.Exit(1)

    session = open_session(day, data_dir)
    result = add_task(session, task_text)
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(1)

    finish_session(session)
    print_success(format_event(result.value))


@app.command("toggle")
def toggle(
    number: int = typer.Argument(..., help="Task number as shown by 'list'"),
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Mark a todo done or not done.

    Tasks with subtasks follow their subtasks and cannot be toggled directly.
    """
    session = open_session(day, data_dir)
    result = toggle_task(session, number)
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(1)

    finish_session(session)
    print_success(format_event(result.value))


@app.command("delete")
def delete(
    number: int = typer.Argument(..., help="Task number as shown by 'list'"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation"),
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Delete a todo; deleting a group also deletes its subtasks."""
    session = open_session(day, data_dir)
    found = session.store.deletable_at(number)
    if isinstance(found, Err):
        print_error(found.error.message)
        raise typer.Exit(1)

    if not yes and not typer.confirm(f"Delete '{found.value.text}' ?", default=False):
        typer.echo("Nothing deleted.")
        return

    result = delete_task(session, number)
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(1)

    finish_session(session)
    print_success(format_event(result.value))


@app.command("stats")
def stats(
    day: DayOption = None,
    data_dir: DirOption = None,
) -> None:
    """Show completion counts for a day."""
    session = open_session(day, data_dir)
    day_stats = get_day_stats(session)

    typer.echo(f"Day:       {session.day.isoformat()}")
    typer.echo(f"Tasks:     {day_stats.total}")
    typer.echo(f"Done:      {day_stats.done}")
    typer.echo(f"Pending:   {day_stats.pending}")
    typer.echo(f"Groups:    {day_stats.parents} ({day_stats.subtasks} subtasks)")
    typer.echo(f"Progress:  {day_stats.progress_percent}%")

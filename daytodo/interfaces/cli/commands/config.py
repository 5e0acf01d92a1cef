"""Settings CLI commands."""

import json

import typer

from daytodo.global_config import (
    AppSettings,
    get_config_dir,
    get_settings,
    resolve_data_dir,
    save_settings,
)
from daytodo.interfaces.cli.common import print_error, print_success

app = typer.Typer(help="Settings commands")


@app.command("show")
def show() -> None:
    """Print the current settings and where day files are kept."""
    settings = get_settings()
    typer.echo(f"Config file: {get_config_dir() / 'config.json'}")
    typer.echo(f"Day files:   {resolve_data_dir(settings)}")
    typer.echo(json.dumps(settings.model_dump(), indent=2))


@app.command("set")
def set_settings(
    data_dir: str | None = typer.Option(None, "--data-dir", help="Directory for day files"),
    header: bool | None = typer.Option(
        None,
        "--header/--no-header",
        help="Write a date and timezone header at the top of day files",
    ),
    utc_offset: int | None = typer.Option(
        None,
        "--utc-offset",
        help="Fixed UTC offset in minutes (e.g. 120 for GMT+0200)",
    ),
    local_time: bool = typer.Option(False, "--local-time", help="Clear the fixed UTC offset"),
) -> None:
    """Update persisted settings.

    Example:
        daytodo config set --data-dir ~/notes/todo --no-header
    """
    current = get_settings().model_dump()
    if data_dir is not None:
        current["data_dir"] = data_dir
    if header is not None:
        current["with_header"] = header
    if utc_offset is not None:
        current["utc_offset_minutes"] = utc_offset
    if local_time:
        current["utc_offset_minutes"] = None

    try:
        settings = AppSettings(**current)
    except ValueError as e:
        print_error(f"Invalid settings: {e}")
        raise typer.Exit(1)

    path = save_settings(settings)
    print_success(f"Saved settings to {path}")

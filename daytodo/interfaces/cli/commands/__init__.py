"""CLI command groups for daytodo.

Command groups:
- todo: One-shot list/add/toggle/delete/stats on a day file
- config: Show and update settings
- session: The interactive editing loop

Each command group is a Typer app that gets registered
with the main app using app.add_typer().
"""

from daytodo.interfaces.cli.commands import config, session, todo

__all__ = ["todo", "config", "session"]

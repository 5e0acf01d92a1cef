"""Interfaces layer for daytodo.

Adapters for external interactions:
- CLI: Command-line interface and interactive session using Typer

The interfaces layer is responsible for:
- Accepting user input and validating it
- Calling application services
- Formatting output for the user
"""

from daytodo.interfaces.cli import app

__all__ = ["app"]

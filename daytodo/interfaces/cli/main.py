"""Entry point for the daytodo CLI.

Usage:
    python -m daytodo.interfaces.cli.main

Or via installed entry point:
    daytodo <command>
"""

from daytodo.interfaces.cli import app


def main() -> None:
    """Run the daytodo CLI application."""
    app()


if __name__ == "__main__":
    main()

"""daytodo CLI.

Re-exports the CLI from daytodo.interfaces.cli so ``python -m daytodo.cli``
works without knowing the package layout.
"""

from daytodo.interfaces.cli import app
from daytodo.interfaces.cli.main import main

__all__ = ["app", "main"]

if __name__ == "__main__":
    main()

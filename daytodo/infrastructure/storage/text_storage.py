"""Plain text file storage with Result-based error handling.

A thin wrapper around whole-file reads and writes, returning Result types
instead of raising exceptions. No knowledge of the day file format.
"""

import logging
from pathlib import Path

from daytodo.domain.shared.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class TextStorage:
    """Whole-file UTF-8 text I/O.

    Example:
        storage = TextStorage()
        result = storage.read_text(Path("2026-10-18.txt"))
        if isinstance(result, Ok):
            text = result.value
        else:
            print(f"Error: {result.error}")
    """

    def read_text(self, path: Path, missing_ok: bool = True) -> Result[str, str]:
        """Read a file in one go.

        Args:
            path: File to read.
            missing_ok: Treat a missing file as empty instead of an error.

        Returns:
            Ok(str) with the file contents, Err(str) with an error message.
        """
        try:
            if not path.exists():
                if missing_ok:
                    return Ok("")
                return Err(f"File not found: {path}")
            content = path.read_text(encoding="utf-8")
            logger.debug(f"Read {len(content)} characters from {path}")
            return Ok(content)

        except UnicodeDecodeError as e:
            return Err(f"{path} is not valid UTF-8: {e}")
        except PermissionError:
            return Err(f"Permission denied reading {path}")
        except OSError as e:
            return Err(f"Error reading {path}: {e}")

    def write_text(self, path: Path, content: str) -> Result[None, str]:
        """Replace a file's contents, creating parent directories as needed.

        Returns:
            Ok(None) if successful, Err(str) with an error message if failed.
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.debug(f"Wrote {len(content)} characters to {path}")
            return Ok(None)

        except PermissionError:
            return Err(f"Permission denied writing {path}")
        except OSError as e:
            return Err(f"Error writing {path}: {e}")

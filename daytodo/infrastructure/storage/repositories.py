"""Repository for day files.

One file per calendar day, named ``YYYY-MM-DD.txt``, inside a data
directory that is created the first time a day is saved.
"""

import logging
from datetime import date, timezone
from pathlib import Path

from daytodo.domain.shared.result import Err, Ok, Result
from daytodo.domain.todo import TaskStore
from daytodo.infrastructure.storage.text_storage import TextStorage

logger = logging.getLogger(__name__)


def day_file_name(day: date) -> str:
    """File name for a day, e.g. ``2026-10-18.txt``."""
    return f"{day.isoformat()}.txt"


class DayFileRepository:
    """Loads and saves the task store of a single day.

    Args:
        data_dir: Directory holding the day files.
        storage: TextStorage instance to use. Creates new one if not provided.
    """

    def __init__(self, data_dir: Path, storage: TextStorage | None = None) -> None:
        self.data_dir = data_dir
        self._storage = storage or TextStorage()

    def path_for(self, day: date) -> Path:
        return self.data_dir / day_file_name(day)

    def load(self, day: date, tz: timezone, with_header: bool = True) -> Result[TaskStore, str]:
        """Read and decode the file for ``day``.

        A missing file is an empty day. Read failures and corrupt content
        are both reported as Err(str); corrupt content is never partially
        loaded.
        """
        path = self.path_for(day)
        raw = self._storage.read_text(path)
        if isinstance(raw, Err):
            return raw

        result = TaskStore.load(raw.value, day, tz, with_header=with_header)
        if isinstance(result, Err):
            return Err(f"Corrupt day file {path}: {result.error.message}")
        return Ok(result.value)

    def save(self, store: TaskStore) -> Result[Path, str]:
        """Write the whole store back to its day file."""
        path = self.path_for(store.reference_date)
        result = self._storage.write_text(path, store.serialize())
        if isinstance(result, Err):
            return result
        logger.info(f"Saved {len(store)} records to {path}")
        return Ok(path)

    def list_days(self) -> list[date]:
        """Days that have a file, oldest first."""
        if not self.data_dir.is_dir():
            return []
        days: list[date] = []
        for entry in self.data_dir.glob("*.txt"):
            try:
                days.append(date.fromisoformat(entry.stem))
            except ValueError:
                logger.debug(f"Ignoring {entry.name}: not a day file")
        return sorted(days)

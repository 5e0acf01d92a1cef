"""Day session application service.

Orchestrates one editing session on a day file: load once, apply
mutations in memory, save once at the end. Every mutation returns a
domain event describing what changed.
"""

import logging
from dataclasses import dataclass
from datetime import date, timezone
from pathlib import Path

from daytodo.domain.shared import Err, Ok, Result
from daytodo.domain.todo import (
    DaySaved,
    IndexOutOfRange,
    InvalidGroupMarker,
    RejectedOperation,
    StoreStats,
    TaskAdded,
    TaskDeleted,
    TaskStore,
    TaskToggled,
)
from daytodo.infrastructure.storage import DayFileRepository

logger = logging.getLogger(__name__)


@dataclass
class DaySession:
    """An open day: its store and the repository it came from."""

    store: TaskStore
    repository: DayFileRepository

    @property
    def day(self) -> date:
        return self.store.reference_date

    @property
    def path(self) -> Path:
        return self.repository.path_for(self.day)


def open_day(
    repository: DayFileRepository,
    day: date,
    tz: timezone,
    with_header: bool = True,
) -> Result[DaySession, str]:
    """Load the day file and start a session.

    Args:
        repository: Where day files live.
        day: Calendar day to open.
        tz: Session timezone.
        with_header: Whether the file carries a day header line.

    Returns:
        Ok(DaySession), or Err(str) if the file cannot be read or is corrupt.
    """
    result = repository.load(day, tz, with_header=with_header)
    if isinstance(result, Err):
        logger.error(result.error)
        return result
    return Ok(DaySession(store=result.value, repository=repository))


def add_task(
    session: DaySession, text: str
) -> Result[TaskAdded, InvalidGroupMarker | RejectedOperation]:
    """Append a task (or a group of subtasks) to the day."""
    result = session.store.new(text)
    if isinstance(result, Err):
        return result

    record = result.value
    return Ok(
        TaskAdded(
            day=session.day,
            position=session.store.position(record) or len(session.store),
            text=record.text,
            subtask_count=len(record.children or []),
        )
    )


def toggle_task(
    session: DaySession,
    index: int,
) -> Result[TaskToggled, IndexOutOfRange | RejectedOperation]:
    """Check or uncheck the task shown as number ``index``."""
    result = session.store.toggle_at(index)
    if isinstance(result, Err):
        return result

    record = result.value
    return Ok(
        TaskToggled(
            day=session.day,
            position=index,
            text=record.text,
            done=record.done,
            parent_done=record.parent.done if record.parent else None,
        )
    )


def delete_task(
    session: DaySession,
    index: int,
) -> Result[TaskDeleted, IndexOutOfRange | RejectedOperation]:
    """Delete the task shown as number ``index``, with its subtasks."""
    result = session.store.delete_at(index)
    if isinstance(result, Err):
        return result

    removed = result.value
    return Ok(TaskDeleted(day=session.day, text=removed[0].text, removed=len(removed)))


def save_day(session: DaySession) -> Result[DaySaved, str]:
    """Write the session back to disk. Callers treat failure as fatal."""
    result = session.repository.save(session.store)
    if isinstance(result, Err):
        logger.error(result.error)
        return result
    return Ok(DaySaved(day=session.day, path=str(result.value), records=len(session.store)))


def get_day_stats(session: DaySession) -> StoreStats:
    return session.store.stats()

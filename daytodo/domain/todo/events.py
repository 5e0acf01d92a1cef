"""Todo domain events.

Immutable records of the changes a session made to a day. Application
services return them alongside each mutation; the CLI turns them into
user-facing messages and log lines.
"""

from datetime import UTC, date, datetime
from uuid import uuid4

from pydantic import BaseModel, Field


class DomainEvent(BaseModel):
    """Base class for all domain events.

    Each event has a unique ID and the UTC time it was raised.
    """

    event_id: str = Field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    model_config = {"frozen": True}


class TaskAdded(DomainEvent):
    """Raised when a task (and possibly its subtasks) is appended."""

    day: date
    position: int
    text: str
    subtask_count: int = 0


class TaskToggled(DomainEvent):
    """Raised when a task is checked or unchecked.

    ``parent_done`` is the derived state of the owning parent after the
    toggle, None for top-level tasks.
    """

    day: date
    position: int
    text: str
    done: bool
    parent_done: bool | None = None


class TaskDeleted(DomainEvent):
    """Raised when a task is removed, with the number of records it took."""

    day: date
    text: str
    removed: int


class DaySaved(DomainEvent):
    """Raised after the day file has been written."""

    day: date
    path: str
    records: int

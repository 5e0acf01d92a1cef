"""In-memory task store for one day file.

The store owns every record of the day in file order. Parents are followed
immediately by their subtasks; display numbers are positions in that
sequence and are never stored.
"""

import logging
from collections.abc import Iterator
from datetime import date, datetime, timezone

from pydantic import BaseModel

from daytodo.domain.shared.result import Err, Ok, Result, flat_map

from . import codec
from .errors import (
    IndexOutOfRange,
    InvalidGroupMarker,
    LoadError,
    RejectedOperation,
)
from .linking import link_records
from .models import TaskRecord

logger = logging.getLogger(__name__)

EMPTY_NOTICE = "no todo items"
SUBTASK_INDENT = "  - "


class StoreStats(BaseModel):
    """Completion summary of a store.

    Parents are excluded from ``total``: their state is derived from
    their subtasks, which are counted instead.
    """

    total: int
    done: int
    parents: int
    subtasks: int

    @property
    def pending(self) -> int:
        return self.total - self.done

    @property
    def progress_percent(self) -> float:
        """Calculate completion percentage."""
        if self.total == 0:
            return 0.0
        return round(self.done / self.total * 100, 1)


class TaskStore:
    """Ordered collection of task records for one day.

    Args:
        reference_date: Calendar day the records belong to.
        tz: Timezone used for new timestamps and for decoding.
        with_header: Whether the serialized file starts with a day header.
        records: Initial records, already linked.
    """

    def __init__(
        self,
        reference_date: date,
        tz: timezone,
        with_header: bool = False,
        records: list[TaskRecord] | None = None,
    ) -> None:
        self.reference_date = reference_date
        self.tz = tz
        self.with_header = with_header
        self._records: list[TaskRecord] = list(records or [])

    # -------------------- loading --------------------
    @classmethod
    def load(
        cls,
        raw_text: str,
        reference_date: date,
        tz: timezone,
        with_header: bool = False,
    ) -> Result["TaskStore", LoadError]:
        """Build a store from the full text of a day file.

        Any malformed line or broken group fails the whole load; no partial
        store is returned.
        """
        decoded = codec.decode_lines(raw_text, reference_date, tz, with_header)
        if isinstance(decoded, Err):
            return decoded
        linked = link_records(decoded.value)
        if isinstance(linked, Err):
            logger.debug(f"Linking failed: {linked.error.message}")
            return linked

        logger.info(f"Loaded {len(linked.value)} records for {reference_date.isoformat()}")
        return Ok(cls(reference_date, tz, with_header, linked.value))

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TaskRecord]:
        return iter(self._records)

    @property
    def records(self) -> list[TaskRecord]:
        """Copy of the records in store order."""
        return list(self._records)

    def get(self, index: int) -> Result[TaskRecord, IndexOutOfRange]:
        """Resolve a 1-based display number to its record."""
        if not 1 <= index <= len(self._records):
            return Err(IndexOutOfRange(index=index, size=len(self._records)))
        return Ok(self._records[index - 1])

    def position(self, record: TaskRecord) -> int | None:
        """1-based display number of ``record``, by identity."""
        for i, candidate in enumerate(self._records, start=1):
            if candidate is record:
                return i
        return None

    def stats(self) -> StoreStats:
        countable = [r for r in self._records if not r.is_parent]
        return StoreStats(
            total=len(countable),
            done=sum(1 for r in countable if r.done),
            parents=sum(1 for r in self._records if r.is_parent),
            subtasks=sum(1 for r in self._records if r.is_subtask),
        )

    # -------------------- mutations --------------------
    def new(
        self, text: str, now: datetime | None = None
    ) -> Result[TaskRecord, InvalidGroupMarker | RejectedOperation]:
        """Append a task; ``+ <n> ...`` text creates a parent with n subtasks.

        Args:
            text: Task text as typed by the user.
            now: Creation time, defaults to the current time in the store's tz.

        Returns:
            Ok(created record, the parent for a group) or Err(InvalidGroupMarker), or
            Err(RejectedOperation) for text spanning more than one line.
        """
        if codec.has_line_break(text):
            return Err(RejectedOperation(operation="add", reason="task text must be a single line"))

        marker = codec.parse_group_marker(text)
        if isinstance(marker, Err):
            return Err(InvalidGroupMarker(text=text, reason=marker.error))

        timestamp = (now or datetime.now(self.tz)).replace(microsecond=0)
        group = marker.value
        if group is None:
            record = TaskRecord(done=False, text=text, timestamp=timestamp)
            self._records.append(record)
            logger.debug(f"Added task {text!r}")
            return Ok(record)

        parent = TaskRecord(done=False, text=text, timestamp=timestamp, children=[])
        for position in range(1, group.count + 1):
            child = TaskRecord(
                done=False,
                text=codec.subtask_text(position, group.count, text),
                timestamp=timestamp,
                is_subtask=True,
                parent=parent,
            )
            parent.children.append(child)
        self._records.append(parent)
        self._records.extend(parent.children)
        logger.debug(f"Added group {text!r} with {group.count} subtasks")
        return Ok(parent)

    def toggle(self, record: TaskRecord) -> Result[TaskRecord, RejectedOperation]:
        """Flip a task's done flag.

        Parents cannot be toggled; their state follows their subtasks. For a
        subtask the owning parent is re-derived.
        """
        if record.is_parent:
            return Err(
                RejectedOperation(
                    operation="toggle",
                    reason="a task with subtasks is done when all its subtasks are",
                )
            )

        record.done = not record.done
        if record.parent is not None:
            record.parent.refresh_done()
        logger.debug(f"Toggled {record.text!r} to {'done' if record.done else 'open'}")
        return Ok(record)

    def delete(self, record: TaskRecord) -> Result[list[TaskRecord], RejectedOperation]:
        """Remove a task, and all its subtasks if it is a parent.

        Returns:
            Ok(removed records, parent first) or Err(RejectedOperation) for a
            subtask, which can only go together with its parent.
        """
        checked = self.deletable(record)
        if isinstance(checked, Err):
            return checked

        doomed = [record, *(record.children or [])]
        doomed_ids = {id(r) for r in doomed}
        self._records = [r for r in self._records if id(r) not in doomed_ids]
        logger.debug(f"Deleted {record.text!r} ({len(doomed)} records)")
        return Ok(doomed)

    def deletable(self, record: TaskRecord) -> Result[TaskRecord, RejectedOperation]:
        """Check that ``record`` may be deleted, without deleting it."""
        if record.is_subtask:
            return Err(
                RejectedOperation(
                    operation="delete",
                    reason="subtasks are removed by deleting their parent",
                )
            )
        return Ok(record)

    def toggle_at(self, index: int) -> Result[TaskRecord, IndexOutOfRange | RejectedOperation]:
        return flat_map(self.get(index), self.toggle)

    def delete_at(self, index: int) -> Result[list[TaskRecord], IndexOutOfRange | RejectedOperation]:
        return flat_map(self.get(index), self.delete)

    def deletable_at(self, index: int) -> Result[TaskRecord, IndexOutOfRange | RejectedOperation]:
        return flat_map(self.get(index), self.deletable)

    # -------------------- output --------------------
    def render(self) -> list[str]:
        """Display lines numbered from 1, subtasks indented."""
        if not self._records:
            return [EMPTY_NOTICE]

        lines: list[str] = []
        for i, record in enumerate(self._records, start=1):
            indent = SUBTASK_INDENT if record.is_subtask else ""
            mark = "x" if record.done else " "
            lines.append(f"{i}: {indent}[{mark}] {record.text}")
        return lines

    def serialize(self) -> str:
        """Full day file text, one line per record, newline-terminated."""
        lines: list[str] = []
        if self.with_header:
            lines.append(codec.encode_header(self.reference_date, self.tz))
        lines.extend(codec.encode_record(record) for record in self._records)
        return "".join(f"{line}\n" for line in lines)

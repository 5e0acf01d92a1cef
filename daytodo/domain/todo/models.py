"""Todo domain models.

Records are plain dataclasses rather than pydantic models: a subtask keeps
a non-owning ``parent`` reference back to the record that owns it, and that
cycle has to stay out of equality, repr and serialization.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

from daytodo.domain.shared.result import Err, Ok, Result

PARENT_MARKER = "+"

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(eq=True)
class TaskRecord:
    """One line of a day file.

    A record is a leaf when ``children`` is None and a parent when it is a
    list. Subtasks have ``is_subtask`` set and point back to their owner
    through ``parent``; the owner keeps them in ``children`` in file order.

    Attributes:
        done: Completion flag. Derived from the children for parents.
        text: Free-form description, verbatim from the file.
        timestamp: Timezone-aware creation time.
        is_subtask: True if the record belongs to a parent group.
        children: Subtasks of a parent, None for leaves.
        parent: Owning parent of a subtask (lookup only, not owned).
    """

    done: bool
    text: str
    timestamp: datetime
    is_subtask: bool = False
    children: list["TaskRecord"] | None = None
    parent: "TaskRecord | None" = field(default=None, repr=False, compare=False)

    @property
    def is_parent(self) -> bool:
        return self.children is not None

    @property
    def is_leaf(self) -> bool:
        return self.children is None and not self.is_subtask

    def refresh_done(self) -> bool:
        """Recompute a parent's ``done`` from its children.

        Returns:
            The derived flag. Leaves are returned unchanged.
        """
        if self.children is not None:
            self.done = all(child.done for child in self.children)
        return self.done


@dataclass(frozen=True)
class GroupMarker:
    """Parsed ``+ <count> <label>`` prefix of a parent task."""

    count: int
    label: str


@dataclass(frozen=True)
class DecodedLine:
    """A record fresh from the codec, before parent/child linking.

    ``group_size`` is set when the record opens a parent group and tells the
    linker how many of the following records it owns.
    """

    line_number: int
    record: TaskRecord
    group_size: int | None = None


@dataclass(frozen=True)
class DayHeader:
    """First line of a date-stamped day file.

    Renders as ``Sun Oct 18 2026 - GMT+0200``. The timezone is stored once
    here; task lines only carry a time of day.

    Example:
        header = DayHeader(date(2026, 10, 18), timezone(timedelta(hours=2)))
        str(header)  # 'Sun Oct 18 2026 - GMT+0200'
    """

    day: date
    tz: timezone

    def __str__(self) -> str:
        offset = self.tz.utcoffset(None)
        minutes = int(offset.total_seconds() // 60)
        sign = "+" if minutes >= 0 else "-"
        hours, mins = divmod(abs(minutes), 60)
        return (
            f"{_WEEKDAYS[self.day.weekday()]} {_MONTHS[self.day.month - 1]} "
            f"{self.day.day:02d} {self.day.year} - GMT{sign}{hours:02d}{mins:02d}"
        )

    @classmethod
    def parse(cls, line: str) -> Result["DayHeader", str]:
        """Parse a header line back into a DayHeader.

        Args:
            line: Raw header line, e.g. ``Sun Oct 18 2026 - GMT+0200``.

        Returns:
            Ok(DayHeader) or Err(str) describing what did not match.
        """
        day_part, sep, zone_part = line.strip().partition(" - ")
        if not sep:
            return Err(f"Header is missing ' - ' separator: {line!r}")

        fields = day_part.split()
        if len(fields) != 4 or fields[1] not in _MONTHS:
            return Err(f"Unrecognized header date: {day_part!r}")
        try:
            day = date(int(fields[3]), _MONTHS.index(fields[1]) + 1, int(fields[2]))
        except ValueError as e:
            return Err(f"Invalid header date {day_part!r}: {e}")

        zone = zone_part.strip()
        if (
            not zone.startswith("GMT")
            or len(zone) != 8
            or zone[3] not in "+-"
            or not zone[4:].isdigit()
        ):
            return Err(f"Unrecognized header timezone: {zone!r}")
        minutes = int(zone[4:6]) * 60 + int(zone[6:8])
        if zone[3] == "-":
            minutes = -minutes
        try:
            tz = timezone(timedelta(minutes=minutes))
        except ValueError as e:
            return Err(f"Invalid header timezone {zone!r}: {e}")
        return Ok(cls(day=day, tz=tz))

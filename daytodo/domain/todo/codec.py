"""Line codec for day files.

All functions in this module are pure - no I/O, no side effects.

Line format:
    [ ] some task # 14:03:27
    [x] done task # 09:15:00
    [ ] + 3 groceries # 10:00:00     (opens a group of three subtasks)

The status marker sits at offsets 0-2, the text starts at offset 4 and runs
up to the space before the *last* ``#``. Only the time of day is written;
the calendar date and timezone come from the session.
"""

import logging
from datetime import date, datetime, time, timezone

from daytodo.domain.shared.result import Err, Ok, Result

from .errors import DecodeError
from .models import PARENT_MARKER, DayHeader, DecodedLine, GroupMarker, TaskRecord

logger = logging.getLogger(__name__)

DONE_MARKER = "[x]"
OPEN_MARKER = "[ ]"
DELIMITER = "#"
TEXT_OFFSET = 4
TIME_FORMAT = "%H:%M:%S"

# Everything str.splitlines() treats as a line boundary.
LINE_BREAKS = frozenset("\n\r\x0b\x0c\x1c\x1d\x1e\x85\u2028\u2029")


# =============================================================================
# Group markers
# =============================================================================


def parse_group_marker(text: str) -> Result[GroupMarker | None, str]:
    """Parse the ``+ <count> <label>`` prefix of a parent task.

    Text that does not start with ``+`` followed by whitespace is an ordinary
    task and yields ``Ok(None)``. Once the prefix is present the count is
    mandatory and must be a positive decimal number.

    Args:
        text: Task text as typed or as stored.

    Returns:
        Ok(GroupMarker), Ok(None) for plain text, or Err(str) with the reason.

    Example:
        parse_group_marker("+ 3 groceries")  # Ok(GroupMarker(3, "groceries"))
        parse_group_marker("+  12  ")        # Ok(GroupMarker(12, ""))
        parse_group_marker("+ some")         # Err("missing subtask count")
    """
    if len(text) < 2 or text[0] != PARENT_MARKER or not text[1].isspace():
        return Ok(None)

    rest = text[1:].lstrip()
    end = 0
    while end < len(rest) and rest[end].isdecimal():
        end += 1

    if end == 0:
        return Err("missing subtask count")
    if end < len(rest) and not rest[end].isspace():
        return Err(f"subtask count must be a number, got {rest.split()[0]!r}")

    count = int(rest[:end])
    if count < 1:
        return Err("subtask count must be at least 1")
    return Ok(GroupMarker(count=count, label=rest[end:].strip()))


def subtask_text(position: int, count: int, text: str) -> str:
    """Label for subtask ``position`` of ``count``, e.g. ``2/5 + 5 errands``."""
    return f"{position}/{count} {text}"


# =============================================================================
# Decoding
# =============================================================================


def decode_line(
    line: str,
    line_number: int,
    reference_date: date,
    tz: timezone,
) -> Result[DecodedLine, DecodeError]:
    """Decode one persisted line into a record.

    Args:
        line: Raw line without its trailing newline.
        line_number: 1-based position in the file, used in errors.
        reference_date: Calendar day of the file.
        tz: Timezone of the session.

    Returns:
        Ok(DecodedLine) or Err(DecodeError) naming the line and the reason.
    """

    def fail(reason: str) -> Err[DecodeError]:
        return Err(DecodeError(line_number=line_number, line=line, reason=reason))

    marker = line[:3]
    if marker not in (OPEN_MARKER, DONE_MARKER):
        return fail("status marker must be '[ ]' or '[x]'")
    if line[3:4] != " ":
        return fail("expected a space after the status marker")

    hash_index = line.rfind(DELIMITER)
    if hash_index < 0:
        return fail(f"missing '{DELIMITER}' before the time of day")
    if hash_index <= TEXT_OFFSET or line[hash_index - 1] != " ":
        return fail(f"expected ' {DELIMITER}' after the task text")

    text = line[TEXT_OFFSET : hash_index - 1]
    raw_time = line[hash_index + 1 :].strip()
    try:
        time_of_day = time.fromisoformat(raw_time)
    except ValueError:
        return fail(f"invalid time of day {raw_time!r}")
    if time_of_day.tzinfo is not None:
        return fail("time of day must not carry a timezone")

    timestamp = datetime.combine(reference_date, time_of_day, tzinfo=tz)

    marker_result = parse_group_marker(text)
    if isinstance(marker_result, Err):
        return fail(marker_result.error)
    group = marker_result.value

    record = TaskRecord(done=marker == DONE_MARKER, text=text, timestamp=timestamp)
    return Ok(
        DecodedLine(
            line_number=line_number,
            record=record,
            group_size=group.count if group else None,
        )
    )


def has_line_break(text: str) -> bool:
    """True if ``text`` would not survive as a single line of a day file."""
    return any(ch in LINE_BREAKS for ch in text)


def decode_lines(
    raw_text: str,
    reference_date: date,
    tz: timezone,
    with_header: bool = False,
) -> Result[list[DecodedLine], DecodeError]:
    """Decode every line of a day file, stopping at the first bad one.

    Lines end at ``\\n`` only, with an optional ``\\r`` before it. Empty lines
    are skipped. With ``with_header`` a non-empty first line must be the day
    header; anything else there is a DecodeError, never a silently dropped
    task.
    """
    decoded: list[DecodedLine] = []
    for line_number, line in enumerate(raw_text.split("\n"), start=1):
        line = line.removesuffix("\r")
        if not line.strip():
            continue
        if with_header and line_number == 1:
            header = _check_header(line, reference_date)
            if isinstance(header, Err):
                return header
            continue
        result = decode_line(line, line_number, reference_date, tz)
        if isinstance(result, Err):
            logger.debug(f"Decode failed: {result.error.message}")
            return result
        decoded.append(result.value)
    return Ok(decoded)


def _check_header(line: str, reference_date: date) -> Result[None, DecodeError]:
    header = DayHeader.parse(line)
    if isinstance(header, Err):
        return Err(DecodeError(line_number=1, line=line, reason=f"expected a day header: {header.error}"))
    if header.value.day != reference_date:
        logger.warning(
            f"Day header says {header.value.day.isoformat()}, "
            f"file is loaded for {reference_date.isoformat()}"
        )
    return Ok(None)


# =============================================================================
# Encoding
# =============================================================================


def encode_record(record: TaskRecord) -> str:
    """Encode a record as one line, without the trailing newline."""
    marker = DONE_MARKER if record.done else OPEN_MARKER
    return f"{marker} {record.text} {DELIMITER} {record.timestamp.strftime(TIME_FORMAT)}"


def encode_header(day: date, tz: timezone) -> str:
    """Header line for a date-stamped day file."""
    return str(DayHeader(day=day, tz=tz))

"""Todo domain - day files, tasks and subtask groups.

All exports are pure (no I/O, no side effects).

Key Types:
    TaskRecord - One task line, leaf, parent or subtask
    TaskStore - Ordered records of one day with mutation rules
    DayHeader - Optional first line of a day file
    StoreStats - Completion summary

Codec Functions:
    decode_line - Parse one persisted line
    encode_record - Render one record as a line
    parse_group_marker - Parse the ``+ <n> <label>`` parent prefix

Errors (returned inside Err):
    DecodeError, StructuralLinkError - fatal at load
    IndexOutOfRange, RejectedOperation, InvalidGroupMarker - recoverable

Domain Events:
    TaskAdded, TaskToggled, TaskDeleted, DaySaved
"""

from .codec import (
    decode_line,
    decode_lines,
    encode_header,
    encode_record,
    parse_group_marker,
    subtask_text,
)
from .errors import (
    DecodeError,
    IndexOutOfRange,
    InvalidGroupMarker,
    LoadError,
    RejectedOperation,
    StructuralLinkError,
)
from .events import DaySaved, DomainEvent, TaskAdded, TaskDeleted, TaskToggled
from .linking import link_records
from .models import DayHeader, DecodedLine, GroupMarker, TaskRecord
from .store import EMPTY_NOTICE, StoreStats, TaskStore

__all__ = [
    # Models
    "TaskRecord",
    "GroupMarker",
    "DecodedLine",
    "DayHeader",
    # Store
    "TaskStore",
    "StoreStats",
    "EMPTY_NOTICE",
    # Codec
    "decode_line",
    "decode_lines",
    "encode_record",
    "encode_header",
    "parse_group_marker",
    "subtask_text",
    "link_records",
    # Errors
    "DecodeError",
    "StructuralLinkError",
    "IndexOutOfRange",
    "RejectedOperation",
    "InvalidGroupMarker",
    "LoadError",
    # Events
    "DomainEvent",
    "TaskAdded",
    "TaskToggled",
    "TaskDeleted",
    "DaySaved",
]

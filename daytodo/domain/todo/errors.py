"""Error values returned inside ``Err`` by todo domain operations.

Load failures (``DecodeError``, ``StructuralLinkError``) mean the day file
cannot be trusted and the session must not start. The rest are recoverable
and only affect the command that produced them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodeError:
    """A persisted line does not match the line format."""

    line_number: int
    line: str
    reason: str

    @property
    def message(self) -> str:
        return f"Line {self.line_number}: {self.reason}: {self.line!r}"


@dataclass(frozen=True)
class StructuralLinkError:
    """A parent group claims records that are missing or already claimed."""

    line_number: int
    expected: int
    available: int
    reason: str

    @property
    def message(self) -> str:
        return (
            f"Line {self.line_number}: {self.reason} "
            f"(group of {self.expected}, {self.available} available)"
        )


@dataclass(frozen=True)
class IndexOutOfRange:
    """A user-supplied task number does not resolve to a record."""

    index: int
    size: int

    @property
    def message(self) -> str:
        if self.size == 0:
            return f"No task #{self.index}: the list is empty."
        return f"No task #{self.index}: choose a number from 1 to {self.size}."


@dataclass(frozen=True)
class RejectedOperation:
    """The operation is not allowed on this kind of record."""

    operation: str
    reason: str

    @property
    def message(self) -> str:
        return f"Cannot {self.operation}: {self.reason}"


@dataclass(frozen=True)
class InvalidGroupMarker:
    """Text starts like a parent marker but the count is unusable."""

    text: str
    reason: str

    @property
    def message(self) -> str:
        return f"Invalid subtask group {self.text!r}: {self.reason}"


LoadError = DecodeError | StructuralLinkError

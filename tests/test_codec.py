# tests/test_codec.py

from __future__ import annotations

from datetime import date, timedelta, timezone

import pytest

from daytodo.domain.shared import Err, Ok
from daytodo.domain.todo import (
    DayHeader,
    DecodeError,
    GroupMarker,
    TaskRecord,
    decode_line,
    decode_lines,
    encode_header,
    encode_record,
    parse_group_marker,
)

from .helpers import DAY, TZ, at


def _decode(line: str, line_number: int = 1):
    return decode_line(line, line_number, DAY, TZ)


def test_decode_done_and_open_lines() -> None:
    done = _decode("[x] buy milk # 14:03:27")
    open_ = _decode("[ ] walk the dog # 08:00:00")

    assert isinstance(done, Ok)
    assert done.value.record == TaskRecord(done=True, text="buy milk", timestamp=at(14, 3, 27))
    assert done.value.group_size is None

    assert isinstance(open_, Ok)
    assert open_.value.record.done is False
    assert open_.value.record.text == "walk the dog"
    assert open_.value.record.timestamp.tzinfo == TZ


def test_decode_uses_last_hash_as_delimiter() -> None:
    result = _decode("[ ] fix #42 before lunch # # 09:30:00")

    assert isinstance(result, Ok)
    assert result.value.record.text == "fix #42 before lunch #"
    assert result.value.record.timestamp == at(9, 30)


def test_decode_allows_empty_text() -> None:
    result = _decode("[ ]  # 09:30:00")

    assert isinstance(result, Ok)
    assert result.value.record.text == ""


@pytest.mark.parametrize(
    "line, reason",
    [
        ("[ ] no time here", "missing '#'"),
        ("[X] shouting # 09:00:00", "status marker"),
        ("[-] dash # 09:00:00", "status marker"),
        ("x] short # 09:00:00", "status marker"),
        ("[ ]glued # 09:00:00", "space after the status marker"),
        ("[ ] glued# 09:00:00", "after the task text"),
        ("[ ] late # 25:00:00", "invalid time of day"),
        ("[ ] nothing # ", "invalid time of day"),
        ("[ ] zoned # 09:00:00+02:00", "must not carry a timezone"),
        ("[ ] + lots of things # 10:00:00", "missing subtask count"),
    ],
)
def test_decode_rejects_malformed_lines(line: str, reason: str) -> None:
    result = _decode(line, line_number=7)

    assert isinstance(result, Err)
    assert isinstance(result.error, DecodeError)
    assert result.error.line_number == 7
    assert result.error.line == line
    assert reason in result.error.reason
    assert "Line 7" in result.error.message


def test_decode_flags_parent_group() -> None:
    result = _decode("[ ] + 3 groceries # 10:00:00")

    assert isinstance(result, Ok)
    assert result.value.group_size == 3
    assert result.value.record.text == "+ 3 groceries"
    # Linking, not decoding, turns the record into a parent
    assert result.value.record.children is None


def test_plus_without_whitespace_is_plain_text() -> None:
    result = _decode("[ ] +3 groceries # 10:00:00")

    assert isinstance(result, Ok)
    assert result.value.group_size is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("+ 3 groceries", GroupMarker(count=3, label="groceries")),
        ("+   12   ", GroupMarker(count=12, label="")),
        ("+\t2 pack and ship", GroupMarker(count=2, label="pack and ship")),
        ("+ 1", GroupMarker(count=1, label="")),
    ],
)
def test_parse_group_marker(text: str, expected: GroupMarker) -> None:
    assert parse_group_marker(text) == Ok(expected)


@pytest.mark.parametrize("text", ["plain task", "", "+", "+3 no space", "a + 3 b"])
def test_parse_group_marker_ignores_plain_text(text: str) -> None:
    assert parse_group_marker(text) == Ok(None)


@pytest.mark.parametrize(
    "text, reason",
    [
        ("+ some", "missing subtask count"),
        ("+ 0 nothing", "at least 1"),
        ("+ 3x items", "must be a number"),
        ("+ ", "missing subtask count"),
    ],
)
def test_parse_group_marker_errors(text: str, reason: str) -> None:
    result = parse_group_marker(text)

    assert isinstance(result, Err)
    assert reason in result.error


def test_encode_record() -> None:
    assert encode_record(TaskRecord(done=True, text="buy milk", timestamp=at(8, 5, 9))) == (
        "[x] buy milk # 08:05:09"
    )
    assert encode_record(TaskRecord(done=False, text="a # b", timestamp=at(23, 59, 59))) == (
        "[ ] a # b # 23:59:59"
    )


@pytest.mark.parametrize(
    "record",
    [
        TaskRecord(done=False, text="call mom # later", timestamp=at(7, 5, 9)),
        TaskRecord(done=True, text="  padded  ", timestamp=at(0, 0, 0)),
        TaskRecord(done=True, text="", timestamp=at(12, 30, 1)),
    ],
)
def test_leaf_round_trip(record: TaskRecord) -> None:
    result = decode_line(encode_record(record), 1, DAY, TZ)

    assert isinstance(result, Ok)
    assert result.value.record == record


def test_encode_header() -> None:
    assert encode_header(DAY, TZ) == "Sun Oct 18 2026 - GMT+0200"
    assert encode_header(date(2026, 1, 3), timezone(timedelta(hours=-5, minutes=-30))) == (
        "Sat Jan 03 2026 - GMT-0530"
    )


def test_parse_header() -> None:
    result = DayHeader.parse("Sat Jan 03 2026 - GMT-0530")

    assert isinstance(result, Ok)
    assert result.value.day == date(2026, 1, 3)
    assert result.value.tz.utcoffset(None) == timedelta(hours=-5, minutes=-30)


@pytest.mark.parametrize(
    "line",
    ["garbage", "Sun Oct 18 2026", "Sun Foo 18 2026 - GMT+0200", "Sun Oct 18 2026 - UTC"],
)
def test_parse_header_rejects_garbage(line: str) -> None:
    assert isinstance(DayHeader.parse(line), Err)


def test_decode_lines_skips_header_and_blank_lines() -> None:
    text = "Sun Oct 18 2026 - GMT+0200\n\n[ ] a # 08:00:00\n   \n[x] b # 09:00:00\n"

    result = decode_lines(text, DAY, TZ, with_header=True)

    assert isinstance(result, Ok)
    assert [(d.line_number, d.record.text) for d in result.value] == [(3, "a"), (5, "b")]


def test_decode_lines_without_header_flag_rejects_header() -> None:
    result = decode_lines("Sun Oct 18 2026 - GMT+0200\n[ ] a # 08:00:00\n", DAY, TZ)

    assert isinstance(result, Err)
    assert result.error.line_number == 1


def test_task_line_in_header_slot_is_decode_error() -> None:
    result = decode_lines("[ ] buy milk # 08:00:00\n[x] walk dog # 09:00:00\n", DAY, TZ, with_header=True)

    assert isinstance(result, Err)
    assert result.error.line_number == 1
    assert result.error.line == "[ ] buy milk # 08:00:00"
    assert result.error.reason.startswith("expected a day header")


def test_header_for_another_day_only_warns(caplog: pytest.LogCaptureFixture) -> None:
    result = decode_lines("Sat Oct 17 2026 - GMT+0200\n[ ] a # 08:00:00\n", DAY, TZ, with_header=True)

    assert isinstance(result, Ok)
    assert [d.record.text for d in result.value] == ["a"]
    assert "Day header says 2026-10-17" in caplog.text


def test_empty_file_needs_no_header() -> None:
    assert decode_lines("", DAY, TZ, with_header=True) == Ok([])


def test_decode_lines_accepts_crlf() -> None:
    result = decode_lines("Sun Oct 18 2026 - GMT+0200\r\n[ ] a # 08:00:00\r\n", DAY, TZ, with_header=True)

    assert isinstance(result, Ok)
    assert [(d.line_number, d.record.text) for d in result.value] == [(2, "a")]


@pytest.mark.parametrize("separator", ["\x0b", "\x0c", "\x1c", "\x85", "\u2028", "\u2029"])
def test_only_newline_ends_a_line(separator: str) -> None:
    result = decode_lines(f"[ ] call{separator}mom # 08:00:00\n", DAY, TZ)

    assert isinstance(result, Ok)
    assert [d.record.text for d in result.value] == [f"call{separator}mom"]

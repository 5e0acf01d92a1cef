# tests/helpers.py

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone

DAY = date(2026, 10, 18)
TZ = timezone(timedelta(hours=2))


def at(hour: int, minute: int = 0, second: int = 0, day: date = DAY) -> datetime:
    """Timestamp on the test day in the test timezone."""
    return datetime.combine(day, time(hour, minute, second), tzinfo=TZ)

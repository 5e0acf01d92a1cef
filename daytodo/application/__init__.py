"""Application service layer for daytodo.

Services orchestrate domain operations around a loaded day. Reading and
writing happen only in ``open_day`` and ``save_day``.

Example usage:
    >>> from daytodo.application import open_day, add_task, save_day
    >>> from daytodo.domain.shared import Ok
    >>>
    >>> result = open_day(repository, day, tz)
    >>> if isinstance(result, Ok):
    ...     session = result.value
    ...     add_task(session, "+ 3 groceries")
    ...     save_day(session)
"""

from daytodo.application.session_service import (
    DaySession,
    add_task,
    delete_task,
    get_day_stats,
    open_day,
    save_day,
    toggle_task,
)

__all__ = [
    "DaySession",
    "open_day",
    "add_task",
    "toggle_task",
    "delete_task",
    "save_day",
    "get_day_stats",
]

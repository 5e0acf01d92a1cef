"""Infrastructure layer for daytodo.

Clean interfaces for I/O, wrapped in Result types.

Exports:
    Storage:
        - TextStorage: Whole-file UTF-8 text I/O
        - DayFileRepository: Day file naming, loading and saving
"""

from daytodo.infrastructure.storage import DayFileRepository, TextStorage, day_file_name

__all__ = [
    "TextStorage",
    "DayFileRepository",
    "day_file_name",
]

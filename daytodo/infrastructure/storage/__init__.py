"""Storage infrastructure for daytodo.

Provides the persistence layer for day files, using Result types for
explicit error handling.
"""

from daytodo.infrastructure.storage.repositories import DayFileRepository, day_file_name
from daytodo.infrastructure.storage.text_storage import TextStorage

__all__ = [
    "TextStorage",
    "DayFileRepository",
    "day_file_name",
]

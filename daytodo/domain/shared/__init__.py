"""Shared domain utilities.

Example usage:
    >>> from daytodo.domain.shared import Ok, Err, Result
    >>>
    >>> def parse_number(raw: str) -> Result[int, str]:
    ...     if not raw.strip().isdigit():
    ...         return Err(f"Not a number: {raw!r}")
    ...     return Ok(int(raw))
"""

from daytodo.domain.shared.result import Err, Ok, Result, flat_map

__all__ = [
    "Ok",
    "Err",
    "Result",
    "flat_map",
]

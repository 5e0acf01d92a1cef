"""Ok/Err values for the expected failures of the todo domain.

A corrupt line in a day file, a task number the user mistyped and an
operation the record does not allow are all ordinary outcomes. They come
back as ``Err(error)`` and callers branch with ``isinstance``::

    result = store.toggle_at(number)
    if isinstance(result, Err):
        print_error(result.error.message)
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result = Union[Ok[T], Err[E]]  # noqa: UP007


def flat_map(result: Result[T, E], step: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Run ``step`` on the value of an ``Ok``; an ``Err`` passes through.

    Resolving a task number and then acting on the record it names is the
    typical chain: ``flat_map(store.get(n), store.toggle)``.
    """
    if isinstance(result, Err):
        return result
    return step(result.value)

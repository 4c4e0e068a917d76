"""Result type for collaborator boundaries.

GitHub lookups, config loading and release dispatch report failures as
values instead of exceptions, so callers branch on the outcome:

    match list_branches(http, "octo", "hello"):
        case Ok(names):
            ...
        case Err(error):
            console.warning(str(error))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful outcome.

    Attributes:
        value: The produced value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A failed outcome.

    Attributes:
        error: Description of what went wrong (usually a frozen dataclass).
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Ok[T] | Err[E]

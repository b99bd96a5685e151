"""Value-or-error result type shared by the repository and the resolvers.

Expected, recoverable outcomes (bad input, duplicates, missing rows, storage
failures) are returned as ``Err`` values. Exceptions are reserved for failures
that have not been classified yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeAlias, TypeVar

from .errors import DutyError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False


@dataclass(frozen=True, slots=True)
class Err:
    """Failed outcome carrying a classified error."""

    error: DutyError

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True


Result: TypeAlias = Ok[T] | Err

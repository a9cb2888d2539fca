"""Success/failure outcome returned by every client operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, NoReturn, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome carrying a payload."""

    value: T

    @property
    def is_success(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        """Return the payload."""
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome carrying the error that caused it."""

    error: BaseException

    @property
    def is_success(self) -> Literal[False]:
        return False

    def unwrap(self) -> NoReturn:
        """Re-raise the carried error."""
        raise self.error


Result = Success[T] | Failure

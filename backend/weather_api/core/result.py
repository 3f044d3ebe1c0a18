"""Result Type: tagged union carrying either a value or ordered failure reasons.

Invariants:
    - A Result is exactly one of Success or Failure
    - Both variants are frozen: a Result never changes after construction
    - Failure.reasons keeps the order in which reasons were given
    - Failure always has at least one reason

Design Decisions:
    - Two frozen dataclasses + a Union alias over one class with flags:
      isinstance / match narrows the type for the checker
    - FailureKind lets callers branch on the failure category without parsing
      the reason text; the HTTP layer still maps every Failure to 400
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    """Category of an expected domain failure."""
    DUPLICATE = "duplicate"
    FAIL = "fail"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome wrapping a value."""
    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Failed outcome with ordered, user-facing reasons."""
    reasons: tuple[str, ...]
    kind: FailureKind = FailureKind.FAIL

    def __post_init__(self):
        if not self.reasons:
            raise ValueError("Failure requires at least one reason")

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]


def ok(value: T) -> Success[T]:
    return Success(value)


def fail(*reasons: str, kind: FailureKind = FailureKind.FAIL) -> Failure:
    """Build a Failure from one or more reasons, preserving order."""
    return Failure(reasons=tuple(reasons), kind=kind)

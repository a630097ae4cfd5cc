"""
Value types reported by the task helpers.

`Outcome` is what a safe invocation produces: a value, or nothing at all.
`Absent` deliberately carries no error detail.

`RaceResult` is what a deadline race reports when asked for a value instead
of an exception: the operation's value, or the deadline it missed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Present[T]:
    value: T

    def is_present(self) -> bool:
        return True

    def unwrap_or[D](self, default: D, /) -> T:  # noqa: ARG002
        return self.value

    def to_optional(self) -> T | None:
        return self.value


@dataclass(frozen=True, slots=True)
class Absent:
    def is_present(self) -> bool:
        return False

    def unwrap_or[D](self, default: D, /) -> D:
        return default

    def to_optional(self) -> None:
        return None


ABSENT: Final[Absent] = Absent()

type Outcome[T] = Present[T] | Absent


@dataclass(frozen=True, slots=True)
class Completed[T]:
    value: T

    def timed_out(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class TimedOut:
    timeout_seconds: float

    def timed_out(self) -> bool:
        return True


type RaceResult[T] = Completed[T] | TimedOut

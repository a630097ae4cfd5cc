"""
Result[T, E] sum type.

Used where a success/failure marker has to travel as a value instead of an
exception (per-task markers in a batch, validation helpers).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Never

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or[D](self, default: D, /) -> T:  # noqa: ARG002 - mirrors Err.unwrap_or
        return self.value

    def map[U](self, fn: Callable[[T], U], /) -> Ok[U]:
        return Ok(fn(self.value))


@dataclass(frozen=True, slots=True)
class Err[E]:
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Never:
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap() on Err: {self.error!r}")

    def unwrap_or[D](self, default: D, /) -> D:
        return default

    def map(self, fn: Callable[[object], object], /) -> Err[E]:  # noqa: ARG002
        return self


type Result[T, E] = Ok[T] | Err[E]


def try_call[T](
    fn: Callable[[], T],
    /,
    *exc_types: type[Exception],
) -> Result[T, Exception]:
    """
    Run `fn` and capture matching exceptions as `Err`.

    With no `exc_types`, any `Exception` is captured. Exceptions that do not
    match are re-raised unchanged.
    """
    catch = exc_types or (Exception,)
    try:
        return Ok(fn())
    except catch as exc:
        return Err(exc)

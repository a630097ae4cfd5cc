"""
Safe invocation: run an operation and get an `Outcome` back, never an exception.

Any `Exception` raised by the operation (or by the awaitable it returns) is
absorbed and reported as `ABSENT`. No error detail is kept; callers that need
it should use `try_call` and `Result` instead.

`BaseException` subclasses outside `Exception` (cancellation, interpreter
exit, Ctrl-C) are not absorbed.

There is no timeout here. An awaitable that never settles keeps the safe
wrapper pending forever; race it with `race_deadline` if that matters.
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any

from hostkit.domain.models.outcome import ABSENT, Outcome, Present

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)


def _describe(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _absorbed(source: str, exc: Exception) -> Outcome[Any]:
    logger.debug("Absorbed %s raised by %s", type(exc).__name__, source)
    return ABSENT


def safe_call[**P, T](fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001 - absorbed by contract
        return _absorbed(_describe(fn), exc)
    return Present(value)


async def safe_await[T](awaitable: Awaitable[T], /) -> Outcome[T]:
    try:
        value = await awaitable
    except Exception as exc:  # noqa: BLE001 - absorbed by contract
        return _absorbed(_describe(awaitable), exc)
    return Present(value)


async def safe_call_async[**P, T](
    fn: Callable[P, Awaitable[T]],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> Outcome[T]:
    """
    Call `fn`, await what it returns, and report the value as an `Outcome`.

    A synchronous failure while obtaining the awaitable is absorbed the same
    way as a failure of the awaitable itself.
    """
    try:
        awaitable = fn(*args, **kwargs)
    except Exception as exc:  # noqa: BLE001 - absorbed by contract
        return _absorbed(_describe(fn), exc)
    try:
        value = await awaitable
    except Exception as exc:  # noqa: BLE001 - absorbed by contract
        return _absorbed(_describe(fn), exc)
    return Present(value)


def safe(fn: Callable[..., Any], /) -> Callable[..., Any]:
    """
    Decorator form of `safe_call` / `safe_call_async`.

    Coroutine functions stay coroutine functions; every call returns an
    `Outcome` instead of raising.
    """
    if inspect.iscoroutinefunction(fn):

        @functools.wraps(fn)
        async def _async_wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
            return await safe_call_async(fn, *args, **kwargs)

        return _async_wrapper

    @functools.wraps(fn)
    def _wrapper(*args: Any, **kwargs: Any) -> Outcome[Any]:
        return safe_call(fn, *args, **kwargs)

    return _wrapper

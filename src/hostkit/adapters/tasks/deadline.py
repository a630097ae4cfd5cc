"""
Deadline races: wait for one awaitable for at most a fixed duration.

The race never cancels the operation it watches. When the timer wins, the
operation is left running in the background and its eventual result is
discarded. This bounds how long a caller *waits*, not how long the work
*runs*: an operation that never finishes stays alive (and holds whatever
resources it holds) until the event loop shuts down. Submit only work that
is safe to abandon. `abandoned_count()` reports how many such operations are
still running; operations whose event loop has been closed are no longer
counted.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import math
from typing import TYPE_CHECKING, Any

from hostkit.domain.errors import DeadlineExceeded, OperationCancelled, ValidationError
from hostkit.domain.models.outcome import Completed, RaceResult, TimedOut
from hostkit.domain.policies.timeouts import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)

# Strong references to timed-out operations; the event loop only keeps weak ones.
_abandoned: set[asyncio.Future[Any]] = set()


def _prune_closed() -> None:
    # A loop closed without draining its tasks never runs their done callbacks.
    for task in [t for t in _abandoned if t.get_loop().is_closed()]:
        _abandoned.discard(task)


def abandoned_count() -> int:
    _prune_closed()
    return len(_abandoned)


def _on_abandoned_done(task: asyncio.Future[Any]) -> None:
    _abandoned.discard(task)
    if task.cancelled():
        logger.debug("Abandoned operation was cancelled after its deadline")
        return
    # Retrieving the exception keeps asyncio from reporting it as never retrieved.
    exc = task.exception()
    if exc is not None:
        logger.debug("Abandoned operation failed after its deadline: %s", type(exc).__name__)
    else:
        logger.debug("Abandoned operation finished after its deadline; result discarded")


def _abandon(task: asyncio.Future[Any]) -> None:
    _prune_closed()
    if task.done():
        return
    _abandoned.add(task)
    task.add_done_callback(_on_abandoned_done)


async def _settles_within(task: asyncio.Future[Any], timeout: float) -> bool:
    try:
        await asyncio.wait({task}, timeout=None if math.isinf(timeout) else timeout)
    except asyncio.CancelledError:
        # The race itself was cancelled; the operation still keeps running.
        _abandon(task)
        raise
    if task.done():
        return True
    _abandon(task)
    logger.debug("Operation missed its %ss deadline; leaving it running", timeout)
    return False


def close_unstarted(awaitable: object) -> None:
    """Close a coroutine that will never be scheduled so it does not warn when collected."""
    if inspect.iscoroutine(awaitable):
        awaitable.close()


def _checked_timeout(awaitable: object, timeout_seconds: float) -> float:
    try:
        return validate_timeout(timeout_seconds)
    except ValidationError:
        close_unstarted(awaitable)
        raise


def _settled_value[T](task: asyncio.Future[T]) -> T:
    if task.cancelled():
        raise OperationCancelled("Raced operation was cancelled before it settled")
    return task.result()


async def race_deadline[T](awaitable: Awaitable[T], timeout_seconds: float) -> T:
    """
    Return the awaitable's value if it settles within `timeout_seconds`.

    The operation's own exception is re-raised unchanged. If the deadline
    passes first, `DeadlineExceeded` is raised and the operation keeps
    running. A zero timeout only succeeds for an awaitable that has already
    settled; `math.inf` waits without a deadline.
    """
    timeout = _checked_timeout(awaitable, timeout_seconds)
    task = asyncio.ensure_future(awaitable)
    if not await _settles_within(task, timeout):
        raise DeadlineExceeded(timeout)
    return _settled_value(task)


async def settle_within[T](awaitable: Awaitable[T], timeout_seconds: float) -> RaceResult[T]:
    """Like `race_deadline`, but report a missed deadline as `TimedOut`."""
    timeout = _checked_timeout(awaitable, timeout_seconds)
    task = asyncio.ensure_future(awaitable)
    if not await _settles_within(task, timeout):
        return TimedOut(timeout)
    return Completed(_settled_value(task))


async def sleep_ms(ms: float) -> None:
    await asyncio.sleep(ms / 1000)

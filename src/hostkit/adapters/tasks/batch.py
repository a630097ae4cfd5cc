"""
Run many awaitables under one shared deadline and keep whatever finished.

Every awaitable gets its own deadline race (see `deadline.py`); all races are
started in submission order and awaited together. Failures, timeouts and
external cancellations of individual operations never reach the caller: the
only symptom is a shorter result list. Callers that need per-task detail use
`gather_settled` directly.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from hostkit.adapters.tasks.deadline import close_unstarted, race_deadline
from hostkit.domain.errors import ValidationError
from hostkit.domain.models.result import Err, Ok, Result
from hostkit.domain.policies.timeouts import validate_timeout

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable

logger = logging.getLogger(__name__)


async def _race_marker[T](awaitable: Awaitable[T], timeout: float) -> Result[T, Exception]:
    try:
        return Ok(await race_deadline(awaitable, timeout))
    except Exception as exc:  # noqa: BLE001 - per-task failures become markers
        return Err(exc)


async def gather_settled[T](
    awaitables: Iterable[Awaitable[T]],
    timeout_seconds: float,
) -> list[Result[T, Exception]]:
    """One `Ok`/`Err` marker per awaitable, in submission order."""
    try:
        timeout = validate_timeout(timeout_seconds)
    except ValidationError:
        # A lazy iterable has not created its coroutines yet; leave it untouched.
        if not isinstance(awaitables, Iterator):
            for item in awaitables:
                close_unstarted(item)
        raise
    submitted = list(awaitables)
    if not submitted:
        return []
    races = [asyncio.ensure_future(_race_marker(item, timeout)) for item in submitted]
    return list(await asyncio.gather(*races))


async def gather_within[T](awaitables: Iterable[Awaitable[T]], timeout_seconds: float) -> list[T]:
    markers = await gather_settled(awaitables, timeout_seconds)
    survivors = [marker.value for marker in markers if isinstance(marker, Ok)]
    if markers:
        logger.debug(
            "Batch settled: submitted=%d survived=%d dropped=%d",
            len(markers),
            len(survivors),
            sum(1 for marker in markers if isinstance(marker, Err)),
        )
    return survivors

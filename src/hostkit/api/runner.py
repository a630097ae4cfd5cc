from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from hostkit.adapters.tasks.batch import gather_within
from hostkit.adapters.tasks.deadline import race_deadline
from hostkit.application.config import TaskConfig

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable


@dataclass(frozen=True, slots=True)
class BatchRunner:
    """
    Deadline-bounded task helpers with the deadline configured once.

    `run()` never raises for individual task failures or timeouts; it returns
    the values of the tasks that finished in time, in submission order.
    """

    config: TaskConfig = field(default_factory=TaskConfig)

    @property
    def timeout_seconds(self) -> float:
        return self.config.default_timeout_seconds

    async def run[T](
        self,
        awaitables: Iterable[Awaitable[T]],
        /,
        *,
        timeout_seconds: float | None = None,
    ) -> list[T]:
        timeout = self.timeout_seconds if timeout_seconds is None else timeout_seconds
        return await gather_within(awaitables, timeout)

    async def race[T](
        self,
        awaitable: Awaitable[T],
        /,
        *,
        timeout_seconds: float | None = None,
    ) -> T:
        timeout = self.timeout_seconds if timeout_seconds is None else timeout_seconds
        return await race_deadline(awaitable, timeout)


def create_runner(
    config: TaskConfig | None = None,
    *,
    default_timeout_seconds: float | None = None,
) -> BatchRunner:
    """Convenience factory; explicit `default_timeout_seconds` overrides `config`."""
    if config is None:
        config = TaskConfig.from_env()
    if default_timeout_seconds is not None:
        config = TaskConfig(default_timeout_seconds=default_timeout_seconds)
    return BatchRunner(config=config)

from __future__ import annotations

import asyncio
import logging

from hostkit import BatchRunner, TaskConfig, safe_call_async


async def _lookup(name: str, delay: float) -> str:
    await asyncio.sleep(delay)
    if name == "broken":
        raise ConnectionError("lookup failed")
    return f"profile:{name}"


async def main() -> None:
    runner = BatchRunner(TaskConfig(default_timeout_seconds=0.05))
    lookups = [("alice", 0.01), ("slow", 0.2), ("broken", 0.0), ("bob", 0.02)]

    found = await runner.run(_lookup(name, delay) for name, delay in lookups)
    print("finished in time:", found)  # noqa: T201

    outcomes = await runner.run(safe_call_async(_lookup, name, delay) for name, delay in lookups)
    print("with absent markers:", outcomes)  # noqa: T201


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    asyncio.run(main())

from __future__ import annotations

from hostkit.adapters.tasks.batch import gather_settled, gather_within
from hostkit.adapters.tasks.deadline import abandoned_count, race_deadline, settle_within, sleep_ms
from hostkit.adapters.tasks.safe import safe, safe_await, safe_call, safe_call_async

__all__ = [
    "abandoned_count",
    "gather_settled",
    "gather_within",
    "race_deadline",
    "safe",
    "safe_await",
    "safe_call",
    "safe_call_async",
    "settle_within",
    "sleep_ms",
]

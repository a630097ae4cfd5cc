"""
hostkit

Helper utilities for the host application. The centrepiece is a set of
asyncio task helpers: safe invocation (`safe_call`, `safe_call_async`), a
single-task deadline race (`race_deadline`), and a batch that keeps whatever
finished in time (`gather_within`). Timed-out work is never cancelled.
"""

from __future__ import annotations

import logging

from hostkit._meta import __version__
from hostkit.adapters.tasks import (
    abandoned_count,
    gather_settled,
    gather_within,
    race_deadline,
    safe,
    safe_await,
    safe_call,
    safe_call_async,
    settle_within,
    sleep_ms,
)
from hostkit.api import BatchRunner, create_runner
from hostkit.application.config import TaskConfig
from hostkit.domain.errors import (
    DeadlineExceeded,
    HostkitError,
    OperationCancelled,
    ValidationError,
)
from hostkit.domain.models import (
    ABSENT,
    Absent,
    Completed,
    Err,
    Ok,
    Present,
    TimedOut,
    try_call,
)
from hostkit.domain.services import (
    UUIDConverter,
    is_equal,
    is_null,
    is_numeric,
    truncate_strings,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ABSENT",
    "Absent",
    "BatchRunner",
    "Completed",
    "DeadlineExceeded",
    "Err",
    "HostkitError",
    "Ok",
    "OperationCancelled",
    "Present",
    "TaskConfig",
    "TimedOut",
    "UUIDConverter",
    "ValidationError",
    "__version__",
    "abandoned_count",
    "create_runner",
    "gather_settled",
    "gather_within",
    "is_equal",
    "is_null",
    "is_numeric",
    "race_deadline",
    "safe",
    "safe_await",
    "safe_call",
    "safe_call_async",
    "settle_within",
    "sleep_ms",
    "truncate_strings",
    "try_call",
]

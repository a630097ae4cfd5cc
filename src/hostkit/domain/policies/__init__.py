from __future__ import annotations

from hostkit.domain.policies.timeouts import (
    DEFAULT_BATCH_TIMEOUT_S,
    MAX_BATCH_TIMEOUT_S,
    validate_default_timeout,
    validate_timeout,
)

__all__ = [
    "DEFAULT_BATCH_TIMEOUT_S",
    "MAX_BATCH_TIMEOUT_S",
    "validate_default_timeout",
    "validate_timeout",
]

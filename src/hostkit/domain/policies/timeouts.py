"""
Timeout defaults for task helpers.

All values are seconds. Races measure wall-clock duration from the moment the
race starts; they are not adjusted for scheduling jitter. `math.inf` means the
race never times out.
"""

from __future__ import annotations

import math

from hostkit.domain.errors import ValidationError

DEFAULT_BATCH_TIMEOUT_S: float = 10.0
# Upper bound for configured defaults only; per-call deadlines are unbounded.
MAX_BATCH_TIMEOUT_S: float = 3600.0


def validate_timeout(value: float, /, *, name: str = "timeout_seconds") -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or math.isnan(value):
        raise ValidationError(f"{name} must be a number, got {value!r}")
    if value < 0:
        raise ValidationError(f"{name} must be >= 0, got {value!r}")
    return float(value)


def validate_default_timeout(value: float, /, *, name: str = "default_timeout_seconds") -> float:
    timeout = validate_timeout(value, name=name)
    if timeout > MAX_BATCH_TIMEOUT_S:
        raise ValidationError(f"{name} must be <= {MAX_BATCH_TIMEOUT_S}, got {value!r}")
    return timeout

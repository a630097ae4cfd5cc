from __future__ import annotations

from hostkit.domain.models.outcome import (
    ABSENT,
    Absent,
    Completed,
    Outcome,
    Present,
    RaceResult,
    TimedOut,
)
from hostkit.domain.models.qq import QQLevel, QQVersionConfig, calc_level, default_version_config
from hostkit.domain.models.result import Err, Ok, Result, try_call

__all__ = [
    "ABSENT",
    "Absent",
    "Completed",
    "Err",
    "Ok",
    "Outcome",
    "Present",
    "QQLevel",
    "QQVersionConfig",
    "RaceResult",
    "Result",
    "TimedOut",
    "calc_level",
    "default_version_config",
    "try_call",
]

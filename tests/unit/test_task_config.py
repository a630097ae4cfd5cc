from __future__ import annotations

import math

import pytest

from hostkit.api import BatchRunner, create_runner
from hostkit.application.config import ENV_DEFAULT_TIMEOUT, TaskConfig
from hostkit.domain.errors import ValidationError
from hostkit.domain.policies.timeouts import (
    DEFAULT_BATCH_TIMEOUT_S,
    MAX_BATCH_TIMEOUT_S,
    validate_default_timeout,
    validate_timeout,
)


@pytest.mark.unit
def test_task_config_defaults_match_policy_constants() -> None:
    assert TaskConfig().default_timeout_seconds == DEFAULT_BATCH_TIMEOUT_S
    assert 0 <= DEFAULT_BATCH_TIMEOUT_S <= MAX_BATCH_TIMEOUT_S


@pytest.mark.unit
@pytest.mark.parametrize(
    "bad", [-1.0, MAX_BATCH_TIMEOUT_S + 1, float("inf"), float("nan"), True]
)
def test_task_config_rejects_out_of_range_timeout(bad: float) -> None:
    with pytest.raises(ValueError, match="default_timeout_seconds"):
        TaskConfig(default_timeout_seconds=bad)


@pytest.mark.unit
def test_task_config_from_mapping_coerces_and_validates() -> None:
    assert TaskConfig.from_mapping({"default_timeout_seconds": "2.5"}).default_timeout_seconds == 2.5
    assert TaskConfig.from_mapping({}) == TaskConfig()

    with pytest.raises(ValidationError, match="Invalid TaskConfig"):
        TaskConfig.from_mapping({"default_timeout_seconds": -3})
    with pytest.raises(ValidationError, match="Invalid TaskConfig"):
        TaskConfig.from_mapping({"unknown": 1})
    with pytest.raises(ValidationError, match="must be a mapping"):
        TaskConfig.from_mapping([("default_timeout_seconds", 1)])  # type: ignore[arg-type]


@pytest.mark.unit
def test_task_config_from_env() -> None:
    assert TaskConfig.from_env({}) == TaskConfig()
    assert TaskConfig.from_env({ENV_DEFAULT_TIMEOUT: "  "}) == TaskConfig()
    assert TaskConfig.from_env({ENV_DEFAULT_TIMEOUT: "0.75"}).default_timeout_seconds == 0.75

    with pytest.raises(ValidationError):
        TaskConfig.from_env({ENV_DEFAULT_TIMEOUT: "soon"})


@pytest.mark.unit
def test_create_runner_prefers_explicit_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_DEFAULT_TIMEOUT, "4")

    assert create_runner().timeout_seconds == 4.0
    assert create_runner(default_timeout_seconds=1.5).timeout_seconds == 1.5
    assert create_runner(TaskConfig(default_timeout_seconds=2.0)).timeout_seconds == 2.0
    assert BatchRunner().timeout_seconds == DEFAULT_BATCH_TIMEOUT_S


@pytest.mark.unit
def test_timeout_cap_applies_to_config_not_to_per_call_deadlines() -> None:
    assert validate_timeout(MAX_BATCH_TIMEOUT_S * 2) == MAX_BATCH_TIMEOUT_S * 2
    assert validate_timeout(math.inf) == math.inf

    with pytest.raises(ValidationError, match="must be <= 3600.0"):
        validate_default_timeout(MAX_BATCH_TIMEOUT_S * 2)

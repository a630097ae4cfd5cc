from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from hostkit.domain.errors import ValidationError
from hostkit.domain.policies.timeouts import (
    DEFAULT_BATCH_TIMEOUT_S,
    MAX_BATCH_TIMEOUT_S,
    validate_default_timeout,
)

ENV_DEFAULT_TIMEOUT = "HOSTKIT_DEFAULT_TIMEOUT_S"


class _TaskConfigPayload(BaseModel):
    model_config = ConfigDict(extra="forbid")

    default_timeout_seconds: float = Field(
        default=DEFAULT_BATCH_TIMEOUT_S, ge=0, le=MAX_BATCH_TIMEOUT_S
    )


@dataclass(frozen=True, slots=True)
class TaskConfig:
    """Settings shared by every batch a host application runs."""

    default_timeout_seconds: float = DEFAULT_BATCH_TIMEOUT_S

    def __post_init__(self) -> None:
        validate_default_timeout(
            self.default_timeout_seconds, name="TaskConfig.default_timeout_seconds"
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], /) -> TaskConfig:
        if not isinstance(data, Mapping):
            raise ValidationError("TaskConfig data must be a mapping")
        try:
            payload = _TaskConfigPayload.model_validate(dict(data))
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid TaskConfig: {exc}") from exc
        return cls(default_timeout_seconds=payload.default_timeout_seconds)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> TaskConfig:
        env = os.environ if environ is None else environ
        raw = (env.get(ENV_DEFAULT_TIMEOUT) or "").strip()
        if not raw:
            return cls()
        return cls.from_mapping({"default_timeout_seconds": raw})

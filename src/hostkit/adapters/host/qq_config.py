"""
Locate and read the desktop client's `versions/config.json`.

On Linux the client keeps it under `~/.config/QQ/versions/`. Everywhere else it
ships next to the executable under `resources/app/versions/`.
"""

from __future__ import annotations

import platform
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from hostkit.domain.errors import ValidationError
from hostkit.domain.models.qq import QQVersionConfig, default_version_config


class _VersionConfigDocument(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    base_version: str = Field(alias="baseVersion")
    cur_version: str = Field(alias="curVersion")
    build_id: str = Field(alias="buildId")
    prev_version: str = Field(default="", alias="prevVersion")
    on_error_versions: list[str] = Field(default_factory=list, alias="onErrorVersions")


def _system(system: str | None) -> str:
    return (system or platform.system()).lower()


def default_config_for_host(system: str | None = None) -> QQVersionConfig:
    return default_version_config(_system(system))


def version_config_path(
    exe_path: str | Path = "",
    *,
    system: str | None = None,
    home: Path | None = None,
) -> Path | None:
    """Return the config path for this host, or None when the file is missing."""
    if _system(system) == "linux":
        base = home if home is not None else Path.home()
        candidate = base / ".config" / "QQ" / "versions" / "config.json"
    else:
        candidate = Path(exe_path).parent / "resources" / "app" / "versions" / "config.json"
    if not candidate.is_file():
        return None
    return candidate


def load_version_config(path: str | Path, /) -> QQVersionConfig:
    raw = Path(path).read_text(encoding="utf-8")
    try:
        document = _VersionConfigDocument.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid version config at {path}: {exc}") from exc
    return QQVersionConfig(
        base_version=document.base_version,
        cur_version=document.cur_version,
        build_id=document.build_id,
        prev_version=document.prev_version,
        on_error_versions=tuple(document.on_error_versions),
    )


def resolve_version_config(
    exe_path: str | Path = "",
    *,
    system: str | None = None,
    home: Path | None = None,
) -> QQVersionConfig:
    """
    Read the host's version config, falling back to the built-in defaults.

    A missing or unreadable file yields the defaults for the platform.
    """
    path = version_config_path(exe_path, system=system, home=home)
    if path is None:
        return default_config_for_host(system)
    try:
        return load_version_config(path)
    except (OSError, ValidationError):
        return default_config_for_host(system)

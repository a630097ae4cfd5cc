from __future__ import annotations

from hostkit.adapters.host.qq_config import (
    default_config_for_host,
    load_version_config,
    resolve_version_config,
    version_config_path,
)

__all__ = [
    "default_config_for_host",
    "load_version_config",
    "resolve_version_config",
    "version_config_path",
]

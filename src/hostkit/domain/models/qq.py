from __future__ import annotations

from dataclasses import dataclass, field

from hostkit.domain.errors import ValidationError

LINUX_BASE_VERSION = "3.2.12-27254"
LINUX_BUILD_ID = "27254"
DESKTOP_BASE_VERSION = "9.9.15-27391"
DESKTOP_BUILD_ID = "27391"


@dataclass(frozen=True, slots=True)
class QQLevel:
    crown_num: int = 0
    sun_num: int = 0
    moon_num: int = 0
    star_num: int = 0

    def __post_init__(self) -> None:
        for name in ("crown_num", "sun_num", "moon_num", "star_num"):
            if getattr(self, name) < 0:
                raise ValidationError(f"QQLevel.{name} must be >= 0")


def calc_level(level: QQLevel, /) -> int:
    """Collapse badge counts into a single level: crown=64, sun=16, moon=4, star=1."""
    return level.crown_num * 64 + level.sun_num * 16 + level.moon_num * 4 + level.star_num


@dataclass(frozen=True, slots=True)
class QQVersionConfig:
    """Contents of the client's `versions/config.json`."""

    base_version: str
    cur_version: str
    build_id: str
    prev_version: str = ""
    on_error_versions: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "baseVersion": self.base_version,
            "curVersion": self.cur_version,
            "prevVersion": self.prev_version,
            "onErrorVersions": list(self.on_error_versions),
            "buildId": self.build_id,
        }


def default_version_config(system: str, /) -> QQVersionConfig:
    """
    Fallback version info used when no config file can be read.

    `system` is a `platform.system()` style name; only Linux ships a
    different client build.
    """
    if system.lower() == "linux":
        return QQVersionConfig(
            base_version=LINUX_BASE_VERSION,
            cur_version=LINUX_BASE_VERSION,
            build_id=LINUX_BUILD_ID,
        )
    return QQVersionConfig(
        base_version=DESKTOP_BASE_VERSION,
        cur_version=DESKTOP_BASE_VERSION,
        build_id=DESKTOP_BUILD_ID,
    )

from __future__ import annotations

import json
from pathlib import Path

import pytest

from hostkit.adapters.host import (
    load_version_config,
    resolve_version_config,
    version_config_path,
)
from hostkit.domain.errors import ValidationError
from hostkit.domain.models.qq import QQVersionConfig, default_version_config

pytestmark = pytest.mark.integration

_DOCUMENT = {
    "baseVersion": "9.9.16-28000",
    "curVersion": "9.9.17-28100",
    "prevVersion": "9.9.16-28000",
    "onErrorVersions": ["9.9.15-27391"],
    "buildId": "28100",
    "unrelated": True,
}


def _write(path: Path, payload: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_linux_path_lives_under_home_config(tmp_path: Path) -> None:
    expected = _write(tmp_path / ".config" / "QQ" / "versions" / "config.json", _DOCUMENT)

    assert version_config_path(system="Linux", home=tmp_path) == expected


def test_desktop_path_lives_next_to_executable(tmp_path: Path) -> None:
    exe = tmp_path / "QQ" / "QQ.exe"
    expected = _write(exe.parent / "resources" / "app" / "versions" / "config.json", _DOCUMENT)

    assert version_config_path(exe, system="Windows") == expected


def test_missing_file_returns_none(tmp_path: Path) -> None:
    assert version_config_path(system="Linux", home=tmp_path) is None
    assert version_config_path(tmp_path / "QQ.exe", system="Windows") is None


def test_load_version_config_maps_client_keys(tmp_path: Path) -> None:
    path = _write(tmp_path / "config.json", _DOCUMENT)

    assert load_version_config(path) == QQVersionConfig(
        base_version="9.9.16-28000",
        cur_version="9.9.17-28100",
        build_id="28100",
        prev_version="9.9.16-28000",
        on_error_versions=("9.9.15-27391",),
    )


@pytest.mark.parametrize("payload", [{"baseVersion": "1"}, ["not", "an", "object"]])
def test_load_version_config_rejects_invalid_documents(tmp_path: Path, payload: object) -> None:
    path = _write(tmp_path / "config.json", payload)

    with pytest.raises(ValidationError, match="Invalid version config"):
        load_version_config(path)


def test_resolve_falls_back_to_defaults(tmp_path: Path) -> None:
    assert resolve_version_config(system="Linux", home=tmp_path) == default_version_config("linux")

    _write(tmp_path / ".config" / "QQ" / "versions" / "config.json", {"broken": 1})
    assert resolve_version_config(system="Linux", home=tmp_path) == default_version_config("linux")


def test_resolve_reads_existing_file(tmp_path: Path) -> None:
    _write(tmp_path / ".config" / "QQ" / "versions" / "config.json", _DOCUMENT)

    assert resolve_version_config(system="Linux", home=tmp_path).build_id == "28100"

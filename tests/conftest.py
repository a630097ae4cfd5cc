from __future__ import annotations

import logging
from pathlib import Path

import pytest

TESTS_ROOT = Path(__file__).resolve().parent
CATEGORY_MARKERS = {
    "unit": "fast tests of one module, no filesystem beyond tmp_path",
    "integration": "several hostkit modules composed the way a host application uses them",
}


def pytest_configure(config: pytest.Config) -> None:
    for name, description in CATEGORY_MARKERS.items():
        config.addinivalue_line("markers", f"{name}: {description}")


def _category_error(item: pytest.Item) -> str | None:
    path = item.path.resolve()
    if not path.is_relative_to(TESTS_ROOT):
        return f"{path}: outside {TESTS_ROOT}"
    directory = path.relative_to(TESTS_ROOT).parts[0]
    if directory not in CATEGORY_MARKERS:
        return f"{path}: place it under one of tests/{{{','.join(sorted(CATEGORY_MARKERS))}}}/"
    marked = sorted({m.name for m in item.iter_markers()} & CATEGORY_MARKERS.keys())
    if marked != [directory]:
        return f"{item.nodeid}: lives in tests/{directory}/ but is marked {marked or 'nothing'}"
    return None


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    errors = [error for item in items if (error := _category_error(item)) is not None]
    if errors:
        raise pytest.UsageError("Test category markers do not match:\n" + "\n".join(errors))


@pytest.fixture
def hostkit_debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.DEBUG, logger="hostkit")
    return caplog

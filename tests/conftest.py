"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_BAGKIT_ENV_VARS = (
    "BAGKIT_MODE",
    "BAGKIT_DATA_BAG_PATH",
    "BAGKIT_SERVER_URL",
    "BAGKIT_DRY_RUN",
    "BAGKIT_HTTP_TIMEOUT",
)


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _isolate_bagkit_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host BAGKIT_* settings out of test configs."""
    for name in _BAGKIT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

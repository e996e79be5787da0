from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `kk/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()

from kk.settings import Settings  # noqa: E402
from kk.store import Store  # noqa: E402


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def store():
    s = Store.open(":memory:")
    yield s
    s.close()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        KK_DB_PATH=Path(":memory:"),
        KK_LOG_DIR=tmp_path / "logs",
        KK_ERROR_DISPLAY_SEC=10.0,
        KK_INPUT_POLL_SEC=0.01,
        EDITOR=None,
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()

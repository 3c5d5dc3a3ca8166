# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmanager.cli.bootstrap import create_initial_state
from taskmanager.core.state import AppState

from .fakes import Transcript


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than the real config module,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="taskmanager-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        data_dir=tmp_path,
        due_dates_enabled=True,
        load_enabled=True,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def transcript() -> Transcript:
    return Transcript()

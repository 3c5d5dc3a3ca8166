# src/taskmanager/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it takes the settings once and
wires the task store and the task file codec into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_file import TaskFileCodec
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    due_dates = bool(getattr(settings, "due_dates_enabled", True))
    state = AppState(
        settings=settings,
        task_store=TaskStore(),
        task_file=TaskFileCodec(settings.data_dir, due_dates=due_dates),
        due_dates_enabled=due_dates,
        load_enabled=bool(getattr(settings, "load_enabled", True)),
    )
    logger.debug("State ready data_dir=%s due_dates=%s", settings.data_dir, due_dates)
    return state

# src/taskmanager/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from ..tasks.task_file import TaskFileCodec
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules.
    settings: object

    task_store: TaskStore
    task_file: TaskFileCodec

    due_dates_enabled: bool = True
    load_enabled: bool = True


class ShellState(StrEnum):
    """What the interactive shell is waiting for."""

    MENU_WAIT = "menu_wait"
    COLLECTING_ADD_FIELDS = "collecting_add_fields"
    COLLECTING_DUE_DATE_PROMPT = "collecting_due_date_prompt"
    COLLECTING_DUE_DATE_VALUE = "collecting_due_date_value"
    COLLECTING_INDEX_FOR_MARK_DONE = "collecting_index_for_mark_done"
    COLLECTING_INDEX_FOR_DELETE = "collecting_index_for_delete"
    COLLECTING_SAVE_CHOICE = "collecting_save_choice"
    COLLECTING_SAVE_FILENAME = "collecting_save_filename"
    COLLECTING_LOAD_FILENAME = "collecting_load_filename"
    EXITING = "exiting"

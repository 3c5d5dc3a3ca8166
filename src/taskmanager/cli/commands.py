# src/taskmanager/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..core.state import AppState, ShellState

if TYPE_CHECKING:
    from .shell import TaskShell

MenuHandler = Callable[["TaskShell"], ShellState]
MenuAvailability = Callable[[AppState], bool]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MenuEntry:
    key: str
    label: str
    handler: MenuHandler
    available: MenuAvailability | None = None

    def is_available(self, state: AppState) -> bool:
        return self.available is None or self.available(state)


class MenuRegistry:
    """Numbered menu used by the shell (1. Add Tasks, 2. List Tasks, ...)."""

    def __init__(self, title: str = "Task Manager Menu:") -> None:
        self.title = title
        self._entries: dict[str, MenuEntry] = {}

    def register(
        self,
        key: str,
        label: str,
        handler: MenuHandler,
        available: MenuAvailability | None = None,
    ) -> None:
        self._entries[key] = MenuEntry(key=key, label=label, handler=handler, available=available)

    def entries(self, state: AppState) -> list[MenuEntry]:
        return [e for e in self._entries.values() if e.is_available(state)]

    def handle(self, shell: TaskShell, choice: str) -> ShellState | None:
        """
        Dispatch a menu choice.
        Returns the next state, or None if the choice is not on the menu.
        """
        entry = self._entries.get(choice.strip())
        if entry is None or not entry.is_available(shell.state):
            return None
        logger.debug("Menu choice %s (%s)", entry.key, entry.label)
        return entry.handler(shell)

    def build_menu(self, state: AppState) -> str:
        entries = self.entries(state)
        lines = ["", self.title]
        for e in entries:
            lines.append(f"{e.key}. {e.label}")
        return "\n".join(lines)

    def build_prompt(self, state: AppState) -> str:
        keys = [e.key for e in self.entries(state)]
        if not keys:
            return "Enter your choice:"
        return f"Enter your choice ({keys[0]}-{keys[-1]}):"


registry = MenuRegistry()


def cmd_add(shell: TaskShell) -> ShellState:
    return ShellState.COLLECTING_ADD_FIELDS


def cmd_list(shell: TaskShell) -> ShellState:
    shell.show_tasks()
    return ShellState.MENU_WAIT


def cmd_mark_done(shell: TaskShell) -> ShellState:
    shell.show_tasks()
    if shell.state.task_store.is_empty():
        return ShellState.MENU_WAIT
    return ShellState.COLLECTING_INDEX_FOR_MARK_DONE


def cmd_delete(shell: TaskShell) -> ShellState:
    shell.show_tasks()
    if shell.state.task_store.is_empty():
        return ShellState.MENU_WAIT
    return ShellState.COLLECTING_INDEX_FOR_DELETE


def cmd_exit(shell: TaskShell) -> ShellState:
    if shell.state.task_store.is_empty():
        shell.emit("No tasks to save")
        return ShellState.EXITING
    return ShellState.COLLECTING_SAVE_CHOICE


def cmd_load(shell: TaskShell) -> ShellState:
    return ShellState.COLLECTING_LOAD_FILENAME


registry.register("1", "Add Tasks", cmd_add)
registry.register("2", "List Tasks", cmd_list)
registry.register("3", "Mark Task as Done", cmd_mark_done)
registry.register("4", "Delete Task", cmd_delete)
registry.register("5", "Exit", cmd_exit)
registry.register("6", "Load Tasks", cmd_load, available=lambda state: state.load_enabled)

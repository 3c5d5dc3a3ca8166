# src/taskmanager/cli/shell.py

"""
Interactive menu shell.

The shell is an explicit state machine: each step reads from the injected
LineSource, acts on the store or the task file codec, prints through
`emit`, and returns the next ShellState. Errors are reported and the loop
goes on; nothing the user types ends the process except the Exit choice
(or end of input).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.ports import Emitter, LineSource
from ..core.state import AppState, ShellState
from ..errors import (
    DueDateParseError,
    InvalidFilenameError,
    InvalidInputError,
    TaskFileError,
    TaskFileNotFoundError,
)
from ..tasks.task_file import list_filename, parse_due_date
from ..tasks.task_models import DATE_FORMAT_HINT, Task
from .commands import MenuRegistry
from .commands import registry as menu_registry

logger = logging.getLogger(__name__)


def read_index(raw: str, size: int) -> int:
    """Parse a 1-based task number typed by the user."""
    if not raw.strip():
        raise InvalidInputError("Invalid input. Please enter a valid task number.")
    try:
        number = int(raw.strip())
    except ValueError:
        number = 0
    if not 1 <= number <= size:
        raise InvalidInputError("Invalid task number. Please enter a valid task number.")
    return number


class TaskShell:
    def __init__(
        self,
        state: AppState,
        source: LineSource,
        emit: Emitter = print,
        *,
        menu: MenuRegistry | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.state = state
        self.source = source
        self.emit = emit
        self.menu = menu or menu_registry
        self._today = today
        self.current = ShellState.MENU_WAIT

        # Fields of the task being added (COLLECTING_ADD_FIELDS -> due date states).
        self._pending_title = ""
        self._pending_description = ""

        self._steps: dict[ShellState, Callable[[], ShellState]] = {
            ShellState.MENU_WAIT: self._menu_wait,
            ShellState.COLLECTING_ADD_FIELDS: self._collect_add_fields,
            ShellState.COLLECTING_DUE_DATE_PROMPT: self._collect_due_date_prompt,
            ShellState.COLLECTING_DUE_DATE_VALUE: self._collect_due_date_value,
            ShellState.COLLECTING_INDEX_FOR_MARK_DONE: self._collect_mark_done_index,
            ShellState.COLLECTING_INDEX_FOR_DELETE: self._collect_delete_index,
            ShellState.COLLECTING_SAVE_CHOICE: self._collect_save_choice,
            ShellState.COLLECTING_SAVE_FILENAME: self._collect_save_filename,
            ShellState.COLLECTING_LOAD_FILENAME: self._collect_load_filename,
        }

    # ---- loop ----

    def run(self) -> None:
        logger.info(
            "Shell started (due_dates=%s load=%s).",
            self.state.due_dates_enabled,
            self.state.load_enabled,
        )
        while self.current is not ShellState.EXITING:
            self.current = self.step()
        logger.info("Shell finished.")

    def step(self) -> ShellState:
        """Run the handler for the current state once and return the next state."""
        handler = self._steps[self.current]
        try:
            return handler()
        except (EOFError, KeyboardInterrupt):
            logger.info("Input closed in state %s, exiting without saving.", self.current)
            self.emit("")
            return ShellState.EXITING
        except Exception:
            logger.exception("Shell handler crashed in state %s.", self.current)
            self.emit("Internal error. Returning to the menu.")
            return ShellState.MENU_WAIT

    def show_tasks(self) -> None:
        store = self.state.task_store
        if store.is_empty():
            self.emit("Task list is empty.")
            return
        self.emit("\nTasks:")
        for line in store.list_tasks(self._today()).render():
            self.emit(line)

    # ---- states ----

    def _menu_wait(self) -> ShellState:
        self.emit(self.menu.build_menu(self.state))
        choice = self.source.read_line(self.menu.build_prompt(self.state))
        next_state = self.menu.handle(self, choice)
        if next_state is None:
            self.emit("\nInvalid choice, Please try again.")
            return ShellState.MENU_WAIT
        return next_state

    def _collect_add_fields(self) -> ShellState:
        self._pending_title = self.source.read_line("\nEnter task title: ")
        self._pending_description = self.source.read_line("\nEnter task description: ")
        if self.state.due_dates_enabled:
            return ShellState.COLLECTING_DUE_DATE_PROMPT
        return self._finish_add(None)

    def _collect_due_date_prompt(self) -> ShellState:
        answer = self.source.read_line(
            "Do you want to have a due date for your task? Enter 1 for yes, 2 for no:"
        ).strip()
        if answer == "1":
            return ShellState.COLLECTING_DUE_DATE_VALUE
        if answer != "2":
            self.emit("Invalid. Discarding Input...")
        return self._finish_add(None)

    def _collect_due_date_value(self) -> ShellState:
        raw = self.source.read_line(
            f"\nPlease enter a valid Due Date. Using the format '{DATE_FORMAT_HINT}':"
        )
        try:
            due_date = parse_due_date(raw)
        except DueDateParseError as e:
            # The task is still added, without a due date.
            logger.warning("Due date rejected for %r: %s", self._pending_title, e)
            self.emit(str(e))
            due_date = None
        return self._finish_add(due_date)

    def _finish_add(self, due_date: date | None) -> ShellState:
        task = Task(self._pending_title, self._pending_description, due_date=due_date)
        self.state.task_store.add(task)
        self._pending_title = self._pending_description = ""
        self.emit("Task successfully created!")
        return ShellState.MENU_WAIT

    def _read_task_number(self, prompt: str) -> int | None:
        store = self.state.task_store
        try:
            return read_index(self.source.read_line(prompt), len(store))
        except InvalidInputError as e:
            self.emit(str(e))
            return None

    def _collect_mark_done_index(self) -> ShellState:
        number = self._read_task_number("\nEnter the task number to mark as done:")
        if number is not None:
            task = self.state.task_store.mark_done(number)
            self.emit(f"Task '{task.title}' marked as done.")
        return ShellState.MENU_WAIT

    def _collect_delete_index(self) -> ShellState:
        number = self._read_task_number("\nEnter the task number to be deleted:")
        if number is not None:
            task = self.state.task_store.delete(number)
            self.emit(f"Task '{task.title}' deleted.")
        return ShellState.MENU_WAIT

    def _collect_save_choice(self) -> ShellState:
        answer = self.source.read_line("Enter 1 to save. 2 to Discard:").strip()
        if answer == "1":
            return ShellState.COLLECTING_SAVE_FILENAME
        if answer != "2":
            self.emit("Invalid. Discarding...")
        logger.info("Exiting without saving %d tasks.", len(self.state.task_store))
        return ShellState.EXITING

    def _collect_save_filename(self) -> ShellState:
        name = self.source.read_line("Please enter a name for the task list:")
        try:
            path = self.state.task_file.save(self.state.task_store, name)
        except InvalidFilenameError as e:
            self.emit(str(e))
            return ShellState.COLLECTING_SAVE_FILENAME
        except TaskFileError as e:
            self.emit(str(e))
            return ShellState.COLLECTING_SAVE_CHOICE
        self.emit(f"Task list saved/updated as {path.name}")
        return ShellState.EXITING

    def _collect_load_filename(self) -> ShellState:
        name = self.source.read_line("\nEnter the filename to load:")
        filename = list_filename(name)
        try:
            count = self.state.task_file.load(self.state.task_store, name)
        except (TaskFileNotFoundError, TaskFileError) as e:
            self.emit(str(e))
        else:
            self.emit(f"Loaded {count} tasks from {filename}")
        return ShellState.MENU_WAIT

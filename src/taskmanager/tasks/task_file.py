# src/taskmanager/tasks/task_file.py

"""
Pipe-delimited task list files.

One task per line, fields in fixed order:

    title|description|status|yyyy/MM/dd-or-empty

The last field only exists when due dates are enabled. Fields are not
escaped, so a title or description containing "|" will not survive a
round trip.
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
from collections.abc import Iterable
from datetime import date, datetime
from pathlib import Path

from ..errors import (
    DueDateParseError,
    InvalidFilenameError,
    TaskFileError,
    TaskFileNotFoundError,
)
from .task_models import DATE_FORMAT, DATE_FORMAT_HINT, Task, TaskStatus, format_due_date
from .task_store import TaskStore

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "|"
LIST_EXTENSION = ".txt"
SAFE_LIST_NAME_REGEX = re.compile(r"^[A-Za-z0-9 _.-]{1,255}$")
# strptime alone accepts "2024/1/5"; the file format is fixed width.
_DATE_SHAPE_REGEX = re.compile(r"^\d{4}/\d{2}/\d{2}$")


def validate_list_name(name: str) -> str:
    """Return the trimmed name, or raise InvalidFilenameError."""
    cleaned = name.strip()
    if not SAFE_LIST_NAME_REGEX.fullmatch(cleaned):
        raise InvalidFilenameError(name)
    return cleaned


def list_filename(name: str) -> str:
    """Bare list name to file name; ".txt" is always appended, as on save."""
    return f"{name.strip()}{LIST_EXTENSION}"


def parse_due_date(text: str) -> date:
    raw = text.strip()
    if not raw:
        raise DueDateParseError(text, "Date can not be empty")
    if not _DATE_SHAPE_REGEX.match(raw):
        raise DueDateParseError(
            text, f"Invalid date format. Must follow '{DATE_FORMAT_HINT}' (got: '{raw}')"
        )
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as e:
        raise DueDateParseError(text, f"Invalid date '{raw}': {e}") from e


class TaskFileCodec:
    """
    Reads and writes task lists under `data_dir`.

    `due_dates` selects the schema: 4 fields when on, 3 when off. A file
    written with one schema is not readable with the other (every line is
    skipped as malformed).
    """

    def __init__(self, data_dir: str | Path = ".", *, due_dates: bool = True) -> None:
        self._data_dir = Path(data_dir)
        self._due_dates = due_dates

    @property
    def field_count(self) -> int:
        return 4 if self._due_dates else 3

    def path_for(self, filename: str) -> Path:
        return self._data_dir / filename

    # ---- line codec ----

    def encode_task(self, task: Task) -> str:
        fields = [task.title, task.description, task.status.value]
        if self._due_dates:
            fields.append(format_due_date(task.due_date) if task.due_date else "")
        return FIELD_SEPARATOR.join(fields)

    def decode_line(self, line: str) -> Task | None:
        """Parse one line; None when the field count does not match the schema."""
        parts = [p.strip() for p in line.split(FIELD_SEPARATOR)]
        if len(parts) != self.field_count:
            return None

        due_date: date | None = None
        if self._due_dates and parts[3]:
            try:
                due_date = parse_due_date(parts[3])
            except DueDateParseError as e:
                logger.warning(
                    "Invalid date format '%s' for task '%s': %s", parts[3], parts[0], e
                )

        return Task(
            title=parts[0],
            description=parts[1],
            status=TaskStatus.from_file(parts[2]),
            due_date=due_date,
        )

    # ---- files ----

    def save(self, store: TaskStore, name: str) -> Path:
        """
        Validate `name`, then write every task to `<name>.txt`.

        The name is checked before anything touches the file system.
        Returns the written path.
        """
        path = self.path_for(validate_list_name(name) + LIST_EXTENSION)
        tmp = path.with_name(path.name + ".tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="\n") as fh:
                for task in store.snapshot():
                    fh.write(self.encode_task(task) + "\n")
            os.replace(tmp, path)
        except OSError as e:
            logger.warning("Failed to save task list to %s: %s", path, e)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskFileError(f"Save failed: {e}") from e

        logger.info("Saved %d tasks to %s", len(store), path)
        return path

    def read_tasks(self, lines: Iterable[str]) -> list[Task]:
        tasks: list[Task] = []
        for lineno, line in enumerate(lines, start=1):
            task = self.decode_line(line.rstrip("\r\n"))
            if task is None:
                logger.debug("Skipping malformed line %d: %r", lineno, line)
                continue
            tasks.append(task)
        return tasks

    def load(self, store: TaskStore, name: str) -> int:
        """
        Replace the store contents with the tasks in `<name>.txt`.

        A missing file raises TaskFileNotFoundError and the store is left alone.
        Returns the number of tasks loaded.
        """
        filename = list_filename(name)
        path = self.path_for(filename)
        if not path.is_file():
            raise TaskFileNotFoundError(filename)

        try:
            with open(path, encoding="utf-8") as fh:
                tasks = self.read_tasks(fh)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to load task list from %s: %s", path, e)
            raise TaskFileError(f"Load failed: {e}") from e

        store.replace_all(tasks)
        logger.info("Loaded %d tasks from %s", len(tasks), path)
        return len(tasks)

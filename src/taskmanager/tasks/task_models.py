# src/taskmanager/tasks/task_models.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y/%m/%d"
# Shown to the user in prompts; same layout as DATE_FORMAT.
DATE_FORMAT_HINT = "yyyy/MM/dd"


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    The values are what the list shows and what the save file stores.
    """

    NOT_DONE = "Not Done"
    DONE = "Done"

    @classmethod
    def from_file(cls, raw: str | None) -> TaskStatus:
        if not raw:
            return cls.NOT_DONE
        try:
            return cls(raw)
        except ValueError:
            logger.warning("Unknown task status %r; treating as %s", raw, cls.NOT_DONE.value)
            return cls.NOT_DONE


def format_due_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


@dataclass(slots=True)
class Task:
    title: str
    description: str
    status: TaskStatus = TaskStatus.NOT_DONE
    due_date: date | None = None
    # Not persisted: a loaded task gets the load time.
    created_at: datetime = field(default_factory=datetime.now, compare=False)

    def due_info(self, today: date) -> str:
        """
        Display-only annotation: "", "DUE: <date>" or "OVERDUE: <date>".
        Overdue means strictly before `today`.
        """
        if self.due_date is None:
            return ""
        if self.due_date < today:
            return f"OVERDUE: {format_due_date(self.due_date)}"
        return f"DUE: {format_due_date(self.due_date)}"


@dataclass(frozen=True, slots=True)
class ListedTask:
    """One row of a listing: 1-based position, the task, its due annotation."""

    index: int
    task: Task
    due_info: str

    def render(self) -> str:
        line = f"{self.index}. {self.task.title} - {self.task.description} - {self.task.status}"
        if self.due_info:
            line += f" - {self.due_info}"
        return line

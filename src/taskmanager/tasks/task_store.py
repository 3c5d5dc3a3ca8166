# src/taskmanager/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date

from ..errors import TaskIndexError
from .task_models import ListedTask, Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskListing:
    """
    Lazy view over the store for display.

    Iterating it again starts over and re-reads the store, so it always
    reflects the current contents. `today` is fixed when the listing is made.
    """

    def __init__(self, tasks: list[Task], today: date) -> None:
        self._tasks = tasks
        self._today = today

    def __iter__(self) -> Iterator[ListedTask]:
        for i, task in enumerate(self._tasks, start=1):
            yield ListedTask(index=i, task=task, due_info=task.due_info(self._today))

    def render(self) -> list[str]:
        return [row.render() for row in self]


class TaskStore:
    """
    In-memory ordered task list (insertion order).

    Identity is positional: public methods take 1-based indices and
    check them against the current size. Deleting shifts every later task
    down by one, so callers must re-list before reusing an index.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    # ---- low-level helpers ----

    def _position(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            logger.debug("Index %s out of range (size=%s)", index, len(self._tasks))
            raise TaskIndexError(index, len(self._tasks))
        return index - 1

    # ---- public API ----

    def add(self, task: Task) -> int:
        """Append `task`; returns its 1-based index."""
        self._tasks.append(task)
        logger.debug("Task added index=%s title=%r due=%s", len(self._tasks), task.title, task.due_date)
        return len(self._tasks)

    def list_tasks(self, today: date | None = None) -> TaskListing:
        return TaskListing(self._tasks, today or date.today())

    def mark_done(self, index: int) -> Task:
        task = self._tasks[self._position(index)]
        task.status = TaskStatus.DONE
        logger.debug("Task marked done index=%s title=%r", index, task.title)
        return task

    def delete(self, index: int) -> Task:
        task = self._tasks.pop(self._position(index))
        logger.debug("Task deleted index=%s title=%r", index, task.title)
        return task

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Clear, then repopulate. Used by load."""
        self._tasks.clear()
        self._tasks.extend(tasks)

    def snapshot(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

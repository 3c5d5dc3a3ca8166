# src/taskmanager/errors.py

"""
Error taxonomy.

Domain code raises these; the shell catches them where the user interacts,
prints the message and keeps looping. None of them is fatal.
"""

from __future__ import annotations


class TaskManagerError(Exception):
    """Base class for every recoverable task manager error."""


class InvalidInputError(TaskManagerError):
    """Blank or unparsable menu/number entry."""


class TaskIndexError(TaskManagerError):
    """Mark-done/delete target is outside the current list bounds."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__("Invalid task index. Task not found.")
        self.index = index
        self.size = size


class InvalidFilenameError(TaskManagerError):
    """Task list name fails the allow-list pattern."""

    def __init__(self, name: str) -> None:
        super().__init__("Invalid Filename.")
        self.name = name


class TaskFileNotFoundError(TaskManagerError):
    def __init__(self, filename: str) -> None:
        super().__init__(f"File not found: {filename}")
        self.filename = filename


class DueDateParseError(TaskManagerError):
    """Due date string does not match yyyy/MM/dd."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(reason)
        self.text = text


class TaskFileError(TaskManagerError):
    """Any other file-system failure while saving or loading."""

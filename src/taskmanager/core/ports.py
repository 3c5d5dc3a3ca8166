# src/taskmanager/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the shell.

The shell depends on Protocols instead of the console directly.
This keeps input swappable (stdin, scripted lines in tests).
"""

from collections.abc import Callable
from typing import Protocol

Emitter = Callable[[str], None]
# Where user-facing text goes; print by default.


class LineSource(Protocol):
    """
    Blocking single-line input.

    Raises EOFError when no more input will ever arrive. A blank line is
    returned as "" and is not end of input.
    """

    def read_line(self, prompt: str = "") -> str: ...

# src/taskmanager/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.shell import TaskShell
from ..core.state import AppState

logger = logging.getLogger(__name__)


class ConsoleLineSource:
    """LineSource over stdin. EOFError / KeyboardInterrupt propagate to the shell."""

    def read_line(self, prompt: str = "") -> str:
        return input(prompt)


def run_console_loop(state: AppState) -> None:
    logger.info("Console connector started.")
    TaskShell(state, ConsoleLineSource(), print).run()
    logger.info("Console connector finished.")

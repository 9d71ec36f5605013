# src/taskmate/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the saved tasks), then runs the
console REPL in the main thread until `bye`.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = logging.getLevelName(settings.log_level)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)
    logger.info("Starting %s (store=%s, log=%s)...", settings.app_name, settings.tasks_path, log_file)

    state = create_initial_state(settings=settings)
    run_console_loop(state)

    logger.info("Bye.")


if __name__ == "__main__":
    main()

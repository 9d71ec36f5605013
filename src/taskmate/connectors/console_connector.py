# src/taskmate/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli import messages
from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.ports import Emitter
from ..core.state import AppState

logger = logging.getLogger(__name__)

DIVIDER = "_" * 60
LOGO = (
    " _            _                    _       \n"
    "| |_ __ _ ___| | ___ __ ___   __ _| |_ ___ \n"
    "| __/ _` / __| |/ / '_ ` _ \\ / _` | __/ _ \\\n"
    "| || (_| \\__ \\   <| | | | | | (_| | ||  __/\n"
    " \\__\\__,_|___/_|\\_\\_| |_| |_|\\__,_|\\__\\___|\n"
)


def _boxed(text: str) -> str:
    body = "\n".join(f"  {line}" for line in text.splitlines())
    return f"{DIVIDER}\n{body}\n{DIVIDER}"


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    emit: Emitter = print,
    registry: CommandRegistry | None = None,
) -> None:
    """
    Blocking REPL: one command per line, each fully handled (store write
    included) before the next line is read. Stops after `bye`, EOF or Ctrl+C.
    """
    registry = registry or command_registry
    app_name = str(getattr(state.settings, "app_name", "taskmate"))

    logger.info("Console connector started (tasks=%d).", state.tasks.size())
    emit(LOGO)
    emit(_boxed(messages.welcome(app_name)))

    while not state.exiting:
        try:
            line = read_line("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            emit("")
            break

        if not line.strip():
            continue

        try:
            reply = registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        emit(_boxed(reply))

    logger.info("Console connector finished.")

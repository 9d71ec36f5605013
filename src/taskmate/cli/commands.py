# src/taskmate/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import CommandError
from ..core.state import AppState
from ..tasks.task_models import Deadline, Event, Task, Todo
from ..tasks.task_store import TaskStoreError
from . import messages
from .parsing import (
    parse_deadline,
    parse_description,
    parse_event,
    parse_keyword,
    parse_task_index,
    split_command,
)

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Keyword -> handler table used by connectors (todo, list, done, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_text: str) -> None:
        # Keywords are case-sensitive: "List" is not "list".
        self._handlers[name] = handler
        self._help[name] = help_text

    def handle(self, state: AppState, line: str) -> str:
        """
        Handle one input line like "deadline report /by 25/12/2024 1800".
        Always returns a reply; unknown keywords leave the state untouched.
        """
        keyword, tail = split_command(line)

        handler = self._handlers.get(keyword)
        if handler is None:
            logger.debug("Unknown command keyword=%r", keyword)
            return messages.error(messages.unknown_command(keyword))

        return handler(state, tail)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _persist(state: AppState, reply: str) -> str:
    """Rewrite the store after a mutation; a failed write is reported, memory is kept."""
    try:
        state.store.save_all(state.tasks.tasks())
    except TaskStoreError:
        logger.exception("Failed to save tasks.")
        return f"{reply}\n{messages.error(messages.save_failed())}"
    return reply


def _add(state: AppState, task: Task) -> str:
    size = state.tasks.add(task)
    logger.debug("Added task kind=%s size=%d", task.kind, size)
    return _persist(state, messages.task_added(task, size))


def cmd_todo(state: AppState, tail: str) -> str:
    description = parse_description(tail, "todo")
    if isinstance(description, CommandError):
        return messages.error(description)
    return _add(state, Todo(description=description))


def cmd_deadline(state: AppState, tail: str) -> str:
    parsed = parse_deadline(tail)
    if isinstance(parsed, CommandError):
        return messages.error(parsed)
    description, due_at = parsed
    return _add(state, Deadline(description=description, due_at=due_at))


def cmd_event(state: AppState, tail: str) -> str:
    parsed = parse_event(tail)
    if isinstance(parsed, CommandError):
        return messages.error(parsed)
    description, window = parsed
    return _add(state, Event(description=description, window=window))


def cmd_done(state: AppState, tail: str) -> str:
    index = parse_task_index(tail, state.tasks.size())
    if isinstance(index, CommandError):
        return messages.error(index)
    task = state.tasks.mark_done(index)
    logger.debug("Marked task %d as done", index + 1)
    return _persist(state, messages.task_marked_done(task))


def cmd_delete(state: AppState, tail: str) -> str:
    index = parse_task_index(tail, state.tasks.size())
    if isinstance(index, CommandError):
        return messages.error(index)
    task = state.tasks.delete(index)
    logger.debug("Deleted task %d, %d left", index + 1, state.tasks.size())
    return _persist(state, messages.task_deleted(task, state.tasks.size()))


def cmd_find(state: AppState, tail: str) -> str:
    keyword = parse_keyword(tail)
    if isinstance(keyword, CommandError):
        return messages.error(keyword)
    return messages.find_results(state.tasks.find_by_keyword(keyword))


def cmd_list(state: AppState, tail: str) -> str:
    if state.tasks.is_empty():
        return messages.empty_list()
    return messages.task_listing(state.tasks.tasks())


def cmd_help(state: AppState, tail: str) -> str:
    return registry.build_help()


def cmd_bye(state: AppState, tail: str) -> str:
    state.exiting = True
    return messages.goodbye()


registry.register("bye", cmd_bye, help_text="Exit the assistant.")
registry.register("help", cmd_help, help_text="Show available commands.")
registry.register("list", cmd_list, help_text="List all tasks.")
registry.register("done", cmd_done, help_text="Mark task n as done: done n.")
registry.register("delete", cmd_delete, help_text="Delete task n: delete n.")
registry.register("todo", cmd_todo, help_text="Add a todo: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline: deadline <description> /by dd/mm/yyyy hhmm."
)
registry.register("event", cmd_event, help_text="Add an event: event <description> /at <details>.")
registry.register("find", cmd_find, help_text="Search descriptions: find <keyword>.")

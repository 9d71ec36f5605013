# src/taskmate/cli/messages.py

"""Reply texts for every situation the assistant reports on."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.errors import CommandError, ErrorKind
from ..tasks.task_models import Task, format_task

LIST_TITLE = "Here are the tasks in your list:"
FIND_TITLE = "Here are the matching tasks in your list:"
OOPS = "☹ OOPS!!!"


def welcome(app_name: str) -> str:
    return f"Hello! I'm {app_name}\nWhat can I do for you?"


def goodbye() -> str:
    return "Bye. Hope to see you again soon!"


def empty_list() -> str:
    return "You have no task at the moment."


def _numbered(tasks: Sequence[Task]) -> list[str]:
    return [f"{i}.{format_task(t)}" for i, t in enumerate(tasks, start=1)]


def task_listing(tasks: Sequence[Task]) -> str:
    return "\n".join([LIST_TITLE, *_numbered(tasks)])


def find_results(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No matching task found."
    return "\n".join([FIND_TITLE, *_numbered(tasks)])


def _count(size: int) -> str:
    noun = "task" if size == 1 else "tasks"
    return f"Now you have {size} {noun} in the list."


def task_added(task: Task, size: int) -> str:
    return f"Got it. I've added this task:\n  {format_task(task)}\n{_count(size)}"


def task_marked_done(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n  {format_task(task)}"


def task_deleted(task: Task, size: int) -> str:
    return f"Noted. I've removed this task:\n  {format_task(task)}\n{_count(size)}"


def unknown_command(keyword: str) -> CommandError:
    return CommandError(
        ErrorKind.UNKNOWN_COMMAND,
        f"I'm sorry, but I don't know what {keyword!r} means :-( Type help to list commands."
        if keyword
        else "I'm sorry, but I don't know what that means :-( Type help to list commands.",
    )


def save_failed() -> CommandError:
    return CommandError(
        ErrorKind.IO_ERROR,
        "Your tasks could not be saved to disk; changes are kept for this session only.",
    )


def error(err: CommandError) -> str:
    return f"{OOPS} {err.message}"

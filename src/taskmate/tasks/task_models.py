# src/taskmate/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

DONE_ICON = "✓"
NOT_DONE_ICON = "✗"


class TaskKind(StrEnum):
    """One-letter tag identifying a task variant (also used on disk)."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


@dataclass(slots=True)
class Todo:
    description: str
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.TODO


@dataclass(slots=True)
class Deadline:
    """
    Task that must be finished by `due_at`.

    `due_at` is already validated ("dd/mm/yyyy hhmm") when the task is created
    from a command and is kept verbatim afterwards.
    """

    description: str
    due_at: str
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.DEADLINE


@dataclass(slots=True)
class Event:
    """Task happening at `window` (free text: time, place, ...)."""

    description: str
    window: str
    done: bool = False

    @property
    def kind(self) -> TaskKind:
        return TaskKind.EVENT


Task = Todo | Deadline | Event


def format_task(task: Task) -> str:
    """Render one task for display, e.g. `[D][✗] report (by: 25/12/2024 1800)`."""
    icon = DONE_ICON if task.done else NOT_DONE_ICON
    head = f"[{task.kind}][{icon}] {task.description}"

    match task:
        case Todo():
            return head
        case Deadline(due_at=due_at):
            return f"{head} (by: {due_at})"
        case Event(window=window):
            return f"{head} (at: {window})"

    raise TypeError(f"Unsupported task type: {type(task).__name__}")

# src/taskmate/tasks/task_codec.py

"""
One-line text record <-> Task.

Record layout (UTF-8, one task per line):

    T | 1 | Buy milk
    D | 0 | Submit report | 25/12/2024 1800
    E | 0 | Team outing | Saturday afternoon, Clementi

Field order: tag | done flag ("1"/"0") | description [| due_at / window].
"""

from __future__ import annotations

from .task_models import Deadline, Event, Task, TaskKind, Todo

FIELD_SEP = " | "

_DONE_FLAGS = {"1": True, "0": False}


class TaskCodecError(ValueError):
    """A line carries a known tag but cannot be decoded."""


def encode_task(task: Task) -> str:
    flag = "1" if task.done else "0"
    match task:
        case Todo():
            fields = [task.kind, flag, task.description]
        case Deadline(due_at=due_at):
            fields = [task.kind, flag, task.description, due_at]
        case Event(window=window):
            fields = [task.kind, flag, task.description, window]
        case _:
            raise TypeError(f"Unsupported task type: {type(task).__name__}")
    return FIELD_SEP.join(fields)


def decode_task(line: str) -> Task | None:
    """
    Decode one record.

    Returns None when the tag is not one we know (foreign/corrupted line the
    caller should skip). Raises TaskCodecError for a known tag whose fields
    are broken.
    """
    line = line.rstrip("\r\n")
    tag, _, _ = line.partition(FIELD_SEP)
    try:
        kind = TaskKind(tag)
    except ValueError:
        return None

    # The trailing free-text field absorbs any further separators.
    expected = 3 if kind is TaskKind.TODO else 4
    fields = line.split(FIELD_SEP, expected - 1)
    if len(fields) != expected:
        raise TaskCodecError(f"Expected {expected} fields for {kind!s}, got {len(fields)}: {line!r}")

    done = _DONE_FLAGS.get(fields[1])
    if done is None:
        raise TaskCodecError(f"Bad done flag {fields[1]!r}: {line!r}")

    description = fields[2]
    if not description.strip():
        raise TaskCodecError(f"Empty description: {line!r}")

    match kind:
        case TaskKind.TODO:
            return Todo(description=description, done=done)
        case TaskKind.DEADLINE | TaskKind.EVENT:
            extra = fields[3]
            if not extra.strip():
                raise TaskCodecError(f"Empty {kind.name.lower()} detail: {line!r}")
            if kind is TaskKind.DEADLINE:
                return Deadline(description=description, due_at=extra, done=done)
            return Event(description=description, window=extra, done=done)

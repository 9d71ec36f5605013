# src/taskmate/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

Command handlers depend on these Protocols instead of concrete classes, so the
flat-file store can be swapped for an in-memory fake in tests.
"""

from collections.abc import Callable, Iterable
from typing import Protocol

from ..tasks.task_models import Task

Emitter = Callable[[str], None]
# Output collaborator: receives one rendered reply per call.


class TaskRepo(Protocol):
    """Whole-collection persistence: read everything once, rewrite everything after each mutation."""

    def load(self) -> list[Task]: ...
    def save_all(self, tasks: Iterable[Task]) -> None: ...

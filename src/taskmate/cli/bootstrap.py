# src/taskmate/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the flat-file TaskStore for the configured path,
- loads the saved tasks into a fresh TaskList and wires both into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_store import TaskStore, TaskStoreError

logger = logging.getLogger(__name__)


def load_task_list(store: TaskRepo) -> TaskList:
    """Read the saved collection; an unreadable store starts the session empty."""
    try:
        return TaskList(store.load())
    except TaskStoreError:
        logger.exception("Failed to load tasks; starting with an empty list.")
        return TaskList()


def create_initial_state(*, settings=None, store: TaskRepo | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the store) injectable makes the app easier to test
    and avoids hidden global config reads. If settings is None, falls back to
    get_settings().
    """
    if settings is None:
        settings = get_settings()

    if store is None:
        store = TaskStore(settings.tasks_path)

    return AppState(settings=settings, tasks=load_task_list(store), store=store)

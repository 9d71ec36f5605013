# src/taskmate/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_list import TaskList
from .ports import TaskRepo


@dataclass(slots=True)
class AppState:
    """
    Everything one session owns.

    Handlers receive this explicitly; nothing else holds a reference to the
    task collection.
    """

    settings: object
    tasks: TaskList
    store: TaskRepo

    # Set by `bye`; the connector stops reading input once it sees it.
    exiting: bool = False

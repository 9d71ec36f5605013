# src/taskmate/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .task_models import Task


class TaskIndexError(IndexError):
    """Raised when a 0-based index does not point at an existing task."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Task index {index} out of range for {size} task(s)")
        self.index = index
        self.size = size


class TaskList:
    """
    Ordered, in-memory task collection owned by one session.

    Insertion order is both the display order and the persistence order.
    Indices are 0-based here; the 1-based positions shown to the user are
    derived from the current order on every command.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def tasks(self) -> list[Task]:
        """Snapshot copy (safe to hand to the store or to renderers)."""
        return list(self._tasks)

    def _check_index(self, index: int) -> None:
        # Negative indices are invalid: no Python-style wrap-around.
        if not 0 <= index < len(self._tasks):
            raise TaskIndexError(index, len(self._tasks))

    def add(self, task: Task) -> int:
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def mark_done(self, index: int) -> Task:
        """Set done=True on the task at `index` (no-op if it is already done)."""
        task = self.get(index)
        task.done = True
        return task

    def delete(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks.pop(index)

    def find_by_keyword(self, keyword: str) -> list[Task]:
        """Case-sensitive substring search over descriptions."""
        return [t for t in self._tasks if keyword in t.description]

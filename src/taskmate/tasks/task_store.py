# src/taskmate/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .task_codec import TaskCodecError, decode_task, encode_task
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStoreError(Exception):
    """The backing file could not be read or written."""


class TaskStore:
    """
    Flat-file task store.

    The whole collection is read once at startup and the whole file is
    rewritten after every mutation (no incremental writes):
    - load() creates an empty file if it is missing
    - save_all() writes to a sibling temp file, then os.replace()s it over the
      target, so readers never observe a half-written file
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Task]:
        try:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._path.touch()
                logger.info("TaskStore created empty file %s", self._path)
                return []
            # newline="": only "\n" ends a record; other break characters stay in the text.
            with open(self._path, encoding="utf-8", newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise TaskStoreError(f"Cannot read tasks from {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                task = decode_task(line)
            except TaskCodecError as e:
                logger.warning("TaskStore skipped malformed line %d in %s: %s", lineno, self._path, e)
                continue
            if task is None:
                logger.debug("TaskStore ignored line %d with unknown tag in %s", lineno, self._path)
                continue
            tasks.append(task)

        logger.info("TaskStore loaded %d task(s) from %s", len(tasks), self._path)
        return tasks

    def save_all(self, tasks: Iterable[Task]) -> None:
        lines = [encode_task(t) + "\n" for t in tasks]
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text("".join(lines), "utf-8", newline="")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise TaskStoreError(f"Cannot write tasks to {self._path}: {e}") from e
        logger.debug("TaskStore saved %d task(s) to %s", len(lines), self._path)

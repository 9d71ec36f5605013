# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskmate.cli.bootstrap import create_initial_state
from taskmate.core.state import AppState
from taskmate.tasks.task_list import TaskList
from taskmate.tasks.task_store import TaskStore

from .fakes import FakeTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment and any .env.
    """
    return SimpleNamespace(
        app_name="taskmate",
        log_level="DEBUG",
        data_dir=tmp_path,
        tasks_path=tmp_path / "data" / "tasks.txt",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired with a real flat-file TaskStore under tmp_path.

    The store's on-disk format is part of what we want to test.
    """
    return create_initial_state(settings=settings)


@pytest.fixture()
def fake_store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def fake_state(settings: SimpleNamespace, fake_store: FakeTaskStore) -> AppState:
    """AppState backed by an in-memory store that records every rewrite."""
    return AppState(settings=settings, tasks=TaskList(), store=fake_store)


@pytest.fixture()
def store_path(settings: SimpleNamespace) -> Path:
    return settings.tasks_path


@pytest.fixture()
def store(store_path: Path) -> TaskStore:
    return TaskStore(store_path)

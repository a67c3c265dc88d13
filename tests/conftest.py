# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.core.state import AppState
from task_tracker.tasks import task_api
from task_tracker.tasks.task_service import TaskService
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="tasks-test",
        log_level="DEBUG",
        log_to_file=False,
        console_enabled=False,
        seed_demo_tasks=False,
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def service(store: TaskStore) -> TaskService:
    """Service over a real in-memory store (fresh per test)."""
    return TaskService(store)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore, service: TaskService) -> AppState:
    return AppState(settings=settings, task_store=store, task_service=service)


@pytest.fixture(autouse=True)
def _fresh_default_service():
    task_api.reset_task_service()
    yield
    task_api.reset_task_service()

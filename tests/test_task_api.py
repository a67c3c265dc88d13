# tests/test_task_api.py

from __future__ import annotations

import pytest

from task_tracker.cli.bootstrap import DEMO_TASKS, create_initial_state, seed_demo_tasks
from task_tracker.tasks import task_api
from task_tracker.tasks.task_service import TaskService
from task_tracker.tasks.task_store import TaskStore


def test_default_service_is_shared_until_reset() -> None:
    first = task_api.get_task_service()
    assert isinstance(first, TaskService)
    assert isinstance(first.repo, TaskStore)
    assert task_api.get_task_service() is first

    task_api.reset_task_service()
    assert task_api.get_task_service() is not first


@pytest.mark.asyncio
async def test_reset_default_service_starts_from_empty_store() -> None:
    await task_api.get_task_service().create_task("T", "D")

    task_api.reset_task_service()
    service = task_api.get_task_service()

    assert await service.get_all_tasks() == []
    assert (await service.create_task("T", "D")).id == 1


def test_create_initial_state_builds_fresh_instances(settings) -> None:
    a = create_initial_state(settings=settings)
    b = create_initial_state(settings=settings)

    assert a.task_store is not b.task_store
    assert a.task_service.repo is a.task_store
    assert a.settings is settings


@pytest.mark.asyncio
async def test_seed_demo_tasks(settings) -> None:
    state = create_initial_state(settings=settings)

    n = await seed_demo_tasks(state)

    pending = await state.task_service.get_pending_tasks()
    assert n == len(DEMO_TASKS) == len(pending)
    assert [t.id for t in pending] == list(range(1, n + 1))

# src/task_tracker/tasks/task_service.py

from __future__ import annotations

"""
Task service.

The single entry point for front ends. It:
- validates titles/descriptions (title first, blank after strip() is invalid),
- checks existence before mutating,
- derives the completed/pending views.

Store errors are never caught here; they reach the caller unchanged.
"""

import logging
from dataclasses import replace

from ..core.ports import TaskRepo
from .errors import EmptyDescriptionError, EmptyTitleError, TaskValidationError
from .task_models import UNASSIGNED_ID, Task

logger = logging.getLogger(__name__)


def _validate(title: str | None, description: str | None) -> tuple[str, str]:
    """Return (title, description) stripped, or raise the first validation error."""
    if not title or not title.strip():
        raise EmptyTitleError()
    if not description or not description.strip():
        raise EmptyDescriptionError()
    return title.strip(), description.strip()


class TaskService:
    def __init__(self, repo: TaskRepo) -> None:
        self._repo = repo

    @property
    def repo(self) -> TaskRepo:
        return self._repo

    async def get_all_tasks(self) -> list[Task]:
        return await self._repo.find_all()

    async def get_task_by_id(self, task_id: int) -> Task:
        return await self._repo.find_by_id(task_id)

    async def create_task(self, title: str | None, description: str | None) -> Task | None:
        try:
            clean_title, clean_description = _validate(title, description)
        except TaskValidationError as e:
            logger.debug("create_task rejected: %s", e)
            raise

        saved = await self._repo.save(
            Task(
                id=UNASSIGNED_ID,
                title=clean_title,
                description=clean_description,
                completed=False,
            )
        )
        logger.info("Task created id=%s", getattr(saved, "id", None))
        return saved

    async def update_task(self, task: Task) -> None:
        try:
            clean_title, clean_description = _validate(task.title, task.description)
        except TaskValidationError as e:
            logger.debug("update_task rejected id=%s: %s", task.id, e)
            raise

        await self._repo.find_by_id(task.id)
        await self._repo.update(
            Task(
                id=task.id,
                title=clean_title,
                description=clean_description,
                completed=task.completed,
            )
        )
        logger.info("Task updated id=%s", task.id)

    async def delete_task(self, task_id: int) -> None:
        # Existence check first: the store's delete() is a silent no-op.
        await self._repo.find_by_id(task_id)
        await self._repo.delete(task_id)
        logger.info("Task deleted id=%s", task_id)

    async def toggle_task_completion(self, task_id: int) -> Task:
        current = await self._repo.find_by_id(task_id)
        toggled = replace(current, completed=not current.completed)
        await self._repo.update(toggled)
        logger.info("Task toggled id=%s completed=%s", task_id, toggled.completed)
        return toggled

    async def get_completed_tasks(self) -> list[Task]:
        return [t for t in await self.get_all_tasks() if t.completed]

    async def get_pending_tasks(self) -> list[Task]:
        return [t for t in await self.get_all_tasks() if not t.completed]

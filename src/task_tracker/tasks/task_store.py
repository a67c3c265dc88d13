# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from dataclasses import replace

from .errors import TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Keeps tasks in insertion order plus a counter for the next auto id.

    Id policy:
    - save() with id=0 takes the counter value and bumps it
    - save() with any other id keeps it and leaves the counter alone
      (no duplicate check, a manual id may later collide with an auto one)
    - deleted ids are never handed out again

    Not thread-safe: one owner, one event loop. Methods are coroutines to
    match the TaskRepo port; none of them awaits anything.
    """

    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._next_id = 1
        logger.info("TaskStore ready (in-memory)")

    # ---- low-level helpers ----

    def _find_index(self, task_id: int) -> int | None:
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                return i
        return None

    def _index_of(self, task_id: int) -> int:
        idx = self._find_index(task_id)
        if idx is None:
            raise TaskNotFoundError(task_id)
        return idx

    # ---- public API ----

    def count_tasks(self) -> int:
        return len(self._tasks)

    async def find_all(self) -> list[Task]:
        """Snapshot of all tasks in insertion order (a new list on every call)."""
        return list(self._tasks)

    async def find_by_id(self, task_id: int) -> Task:
        return self._tasks[self._index_of(task_id)]

    async def save(self, task: Task) -> Task:
        if task.is_new:
            task = replace(task, id=self._next_id)
            self._next_id += 1
        else:
            logger.debug(
                "Saving task with manual id=%s (next auto id stays %s)", task.id, self._next_id
            )

        self._tasks.append(task)
        logger.debug("Task saved id=%s completed=%s total=%s", task.id, task.completed, len(self._tasks))
        return task

    async def update(self, task: Task) -> None:
        idx = self._index_of(task.id)
        self._tasks[idx] = task
        logger.debug("Task updated id=%s completed=%s", task.id, task.completed)

    async def delete(self, task_id: int) -> None:
        idx = self._find_index(task_id)
        if idx is None:
            logger.debug("Delete ignored, no task id=%s", task_id)
            return

        del self._tasks[idx]
        logger.debug("Task deleted id=%s total=%s", task_id, len(self._tasks))

# src/task_tracker/tasks/task_api.py

"""
Process-wide default store/service pair.

Convenience for callers that do not do their own wiring. The pair is built
lazily on first use (empty store, next id = 1) and lives until
reset_task_service() is called. Anything that wants isolation (tests,
alternative backends) should build TaskService(TaskStore()) itself instead.
"""

from __future__ import annotations

import logging

from .task_service import TaskService
from .task_store import TaskStore

logger = logging.getLogger(__name__)

_default_service: TaskService | None = None


def get_task_service() -> TaskService:
    global _default_service
    if _default_service is None:
        _default_service = TaskService(TaskStore())
        logger.debug("Default TaskService created")
    return _default_service


def reset_task_service() -> None:
    """Drop the default pair; the next get_task_service() starts from scratch."""
    global _default_service
    _default_service = None

# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires a fresh TaskStore into a TaskService and both into AppState,
- optionally seeds a few demo tasks.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

DEMO_TASKS: list[tuple[str, str]] = [
    ("Read the README", "Skim the available console commands."),
    ("Create a task", "Use /add <title> | <description>."),
    ("Finish a task", "Use /toggle <id> to mark it done."),
]


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Every call builds its own store and service (no shared globals), which keeps
    tests isolated. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore()
    return AppState(
        settings=settings,
        task_store=store,
        task_service=TaskService(store),
    )


async def seed_demo_tasks(state: AppState) -> int:
    """Create DEMO_TASKS through the service; returns how many were created."""
    for title, description in DEMO_TASKS:
        await state.task_service.create_task(title, description)
    logger.info("Seeded %d demo tasks.", len(DEMO_TASKS))
    return len(DEMO_TASKS)

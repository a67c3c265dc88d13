# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The service depends on Protocols instead of concrete implementations.
This keeps storage backends swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """
    Storage port for tasks.

    Contract:
    - find_by_id/update raise TaskNotFoundError for unknown ids
    - save with id=0 assigns a fresh id, any other id is stored as given
    - delete of an unknown id is a silent no-op
    """

    async def find_all(self) -> list[Task]: ...
    async def find_by_id(self, task_id: int) -> Task: ...
    async def save(self, task: Task) -> Task | None: ...
    async def update(self, task: Task) -> None: ...
    async def delete(self, task_id: int) -> None: ...

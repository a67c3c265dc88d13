# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

# id=0 means "not stored yet": TaskStore.save() assigns the next free id.
UNASSIGNED_ID = 0


@dataclass(slots=True, frozen=True)
class Task:
    """
    A single task record.

    Frozen on purpose: the store hands out its own instances, so callers
    derive new values with dataclasses.replace() instead of editing in place.
    """

    id: int
    title: str
    description: str
    completed: bool = False

    @property
    def is_new(self) -> bool:
        return self.id == UNASSIGNED_ID

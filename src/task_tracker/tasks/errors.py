# src/task_tracker/tasks/errors.py

"""
Domain errors raised by the task store and service.

Messages are part of the public contract: front ends show them verbatim and
some consumers match on the text, so keep them stable.
"""

from __future__ import annotations

TASK_NOT_FOUND_MESSAGE = "Tarefa não encontrada!"
EMPTY_TITLE_MESSAGE = "Tarefa sem título."
EMPTY_DESCRIPTION_MESSAGE = "Tarefa sem descrição."


class TaskError(Exception):
    """Base class for every task-domain error."""


class TaskNotFoundError(TaskError, LookupError):
    def __init__(self, task_id: int | None = None) -> None:
        super().__init__(TASK_NOT_FOUND_MESSAGE)
        self.task_id = task_id


class TaskValidationError(TaskError, ValueError):
    """Rejected input (raised before any store access)."""


class EmptyTitleError(TaskValidationError):
    def __init__(self) -> None:
        super().__init__(EMPTY_TITLE_MESSAGE)


class EmptyDescriptionError(TaskValidationError):
    def __init__(self) -> None:
        super().__init__(EMPTY_DESCRIPTION_MESSAGE)

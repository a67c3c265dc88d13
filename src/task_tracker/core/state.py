# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..tasks.task_service import TaskService
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings live on the state so command handlers can read them.
    settings: Any

    task_store: TaskStore
    task_service: TaskService

# src/dodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore
from .ports import TaskPersistence


@dataclass
class AppState:
    # Settings object (dodo.config.Settings or a test stand-in).
    settings: object

    store: TaskStore
    storage: TaskPersistence

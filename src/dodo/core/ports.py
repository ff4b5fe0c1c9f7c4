# src/dodo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the command layer.

Handlers depend on this Protocol rather than on TaskFile, so tests can swap in
an in-memory or failing implementation.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskPersistence(Protocol):
    """Durable mirror of the task list."""

    def load(self) -> list[Task]: ...

    def append_task(self, task: Task) -> None: ...

    def rewrite_all(self, tasks: Iterable[Task]) -> None: ...

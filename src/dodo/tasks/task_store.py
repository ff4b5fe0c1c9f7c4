# src/dodo/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date

from .task_models import Task

logger = logging.getLogger(__name__)


def sort_key(task: Task) -> tuple[bool, date]:
    """Dated tasks first (earliest date first), undated tasks after them."""
    if task.date is None:
        return True, date.max
    return False, task.date


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    # sorted() is stable: equal keys keep their insertion order.
    return sorted(tasks, key=sort_key)


class TaskStore:
    """
    In-memory, ordered task list.

    Positions are 1-based on every public method. delete_at/mark_done_at expect
    an index already validated with parse_index; anything else is a bug in the
    caller and raises IndexError.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def _offset(self, index: int) -> int:
        if not 1 <= index <= len(self._tasks):
            raise IndexError(f"task index {index} out of range 1..{len(self._tasks)}")
        return index - 1

    # ---- queries ----

    def size(self) -> int:
        return len(self._tasks)

    def get(self, index: int) -> Task:
        return self._tasks[self._offset(index)]

    def all(self) -> list[Task]:
        """Tasks in insertion order (a copy; mutating it leaves the store alone)."""
        return list(self._tasks)

    def sorted_view(self) -> list[Task]:
        return sort_tasks(self._tasks)

    def find(self, keyword: str) -> list[tuple[int, Task]]:
        """Case-insensitive substring search; returns (1-based index, task) pairs."""
        needle = keyword.strip().casefold()
        if not needle:
            return []
        return [
            (i, t)
            for i, t in enumerate(self._tasks, start=1)
            if needle in t.description.casefold()
        ]

    # ---- mutations ----

    def add(self, task: Task) -> None:
        self._tasks.append(task)
        logger.debug("Task added kind=%s size=%d", task.kind.name, len(self._tasks))

    def delete_at(self, index: int) -> Task:
        task = self._tasks.pop(self._offset(index))
        logger.debug("Task deleted index=%d size=%d", index, len(self._tasks))
        return task

    def mark_done_at(self, index: int) -> Task:
        task = self.get(index)
        task.mark_done()
        logger.debug("Task marked done index=%d", index)
        return task

    def sort(self) -> None:
        self._tasks = sort_tasks(self._tasks)

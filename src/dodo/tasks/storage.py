# src/dodo/tasks/storage.py

"""
Plain text persistence for the task list.

One task per line, fields separated by " | ":

    T | N | read book
    D | Y | submit report | 2024-03-15
    E | N | team dinner | 2024-04-01

There is no trailing newline after the last record. Loading is not read-only:
the loaded tasks are sorted and the file is rewritten in that order.
"""

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..errors import CorruptRecordError, DodoError, StorageError
from .date_parser import format_date
from .task_models import Task, TaskKind
from .task_parser import FIELD_SEPARATOR, parse_add
from .task_store import sort_tasks

logger = logging.getLogger(__name__)

RECORD_SEPARATOR = f" {FIELD_SEPARATOR} "

DONE_FLAGS = {"Y": True, "N": False}


def serialize_task(task: Task) -> str:
    fields = [task.type_tag, task.status_icon, task.description]
    match task.kind:
        case TaskKind.DEADLINE | TaskKind.EVENT:
            assert task.date is not None
            fields.append(format_date(task.date))
        case TaskKind.TODO:
            pass
    return RECORD_SEPARATOR.join(fields)


def parse_record(line: str, line_number: int = 1) -> Task:
    """Rebuild a task from one task file line; raises CorruptRecordError."""
    fields = [f.strip() for f in line.split(FIELD_SEPARATOR)]

    try:
        kind = TaskKind(fields[0].upper())
    except ValueError:
        raise CorruptRecordError(line_number, line, f"unknown type tag {fields[0]!r}") from None

    expected = 4 if kind.is_dated else 3
    if len(fields) != expected:
        raise CorruptRecordError(
            line_number, line, f"expected {expected} fields, got {len(fields)}"
        )

    done = DONE_FLAGS.get(fields[1].upper())
    if done is None:
        raise CorruptRecordError(line_number, line, f"unknown done flag {fields[1]!r}")

    try:
        task = parse_add(kind, FIELD_SEPARATOR.join(fields[2:]))
    except DodoError as e:
        raise CorruptRecordError(line_number, line, e.kind.value) from e

    if done:
        task.mark_done()
    return task


class TaskFile:
    """
    The backing file for one task list.

    Each call opens, reads or writes, and closes the file; no handle is kept.
    Every OSError is re-raised as StorageError.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_text(self) -> str:
        try:
            data = self._path.read_bytes()
        except OSError as e:
            raise StorageError(self._path, f"cannot read {self._path}: {e}") from e
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            line_number = data.count(b"\n", 0, e.start) + 1
            line = data.splitlines()[line_number - 1].decode("utf-8", errors="replace")
            raise CorruptRecordError(line_number, line, "not valid UTF-8") from e

    def load(self) -> list[Task]:
        """
        Read every record, sort, rewrite the file sorted, return the tasks.

        A missing file is created empty. Blank lines are skipped; any other
        bad line aborts the whole load with CorruptRecordError.
        """
        if not self._path.exists():
            self.rewrite_all([])
            logger.info("Task file created path=%s", self._path)
            return []

        tasks: list[Task] = []
        for line_number, line in enumerate(self._read_text().splitlines(), start=1):
            if not line.strip():
                continue
            tasks.append(parse_record(line, line_number))

        ordered = sort_tasks(tasks)
        self.rewrite_all(ordered)
        logger.info("Loaded %d tasks from %s", len(ordered), self._path)
        return ordered

    def append_task(self, task: Task) -> None:
        record = serialize_task(task)
        try:
            non_empty = self._path.exists() and self._path.stat().st_size > 0
            with open(self._path, "a", encoding="utf-8", newline="") as f:
                f.write(f"\n{record}" if non_empty else record)
        except OSError as e:
            raise StorageError(self._path, f"cannot append to {self._path}: {e}") from e
        logger.debug("Task appended path=%s record=%r", self._path, record)

    def rewrite_all(self, tasks: Iterable[Task]) -> None:
        """Replace the file contents with the given tasks, in order."""
        records = [serialize_task(t) for t in tasks]
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp, "w", encoding="utf-8", newline="") as f:
                f.write("\n".join(records))
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(self._path, f"cannot write {self._path}: {e}") from e
        logger.debug("Task file rewritten path=%s records=%d", self._path, len(records))

# src/dodo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date
from enum import StrEnum


class TaskKind(StrEnum):
    """
    Task variant tag.

    The value doubles as the type tag written to the task file.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def is_dated(self) -> bool:
        return self is not TaskKind.TODO


@dataclass(slots=True)
class Task:
    kind: TaskKind
    description: str
    date: Date | None = None
    done: bool = False

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")
        if self.kind.is_dated and self.date is None:
            raise ValueError(f"{self.kind.name.lower()} requires a date")
        if not self.kind.is_dated and self.date is not None:
            raise ValueError("todo cannot carry a date")

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: Date) -> Task:
        return cls(TaskKind.DEADLINE, description, by)

    @classmethod
    def event(cls, description: str, at: Date) -> Task:
        return cls(TaskKind.EVENT, description, at)

    @property
    def type_tag(self) -> str:
        return self.kind.value

    @property
    def status_icon(self) -> str:
        return "Y" if self.done else "N"

    def mark_done(self) -> None:
        self.done = True

# src/dodo/tasks/task_parser.py

"""
Command-argument parsing.

Turns the free text after a command keyword into a validated Task, and the
argument of done/delete into a checked 1-based index. Nothing here touches the
store or the task file.
"""

from __future__ import annotations

import re

from ..errors import DodoError, ErrorKind
from .date_parser import parse_date
from .task_models import Task, TaskKind

FIELD_SEPARATOR = "|"

DATE_SEPARATORS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: " /by ",
    TaskKind.EVENT: " /at ",
}

INDEX_RE = re.compile(r"^[+-]?[0-9]+$")


def split_command(line: str) -> tuple[str, str]:
    """
    Split "keyword rest of line" into (keyword, args).

    The keyword is lower-cased; args keep their original text (may be "").
    """
    parts = line.strip().split(" ", 1)
    keyword = parts[0].lower()
    args = parts[1] if len(parts) > 1 else ""
    return keyword, args


def _split_dated(kind: TaskKind, text: str) -> list[str]:
    pattern = f"{re.escape(DATE_SEPARATORS[kind])}|{re.escape(FIELD_SEPARATOR)}"
    return re.split(pattern, text)


def _clean_description(raw: str) -> str:
    description = raw.strip()
    if not description:
        raise DodoError(ErrorKind.EMPTY_DESCRIPTION)
    if FIELD_SEPARATOR in description:
        raise DodoError(
            ErrorKind.MALFORMED_TASK_INPUT,
            f"description cannot contain {FIELD_SEPARATOR!r}",
        )
    return description


def parse_add(kind: TaskKind, raw_args: str) -> Task:
    """
    Build a task of the given kind from command arguments.

    Deadlines and events need "<description> /by <date>" (or /at). A literal
    "|" is accepted as the separator too, which is how task file records are
    fed back through this parser.
    """
    text = (raw_args or "").strip()
    if not text:
        raise DodoError(ErrorKind.EMPTY_DESCRIPTION)

    match kind:
        case TaskKind.TODO:
            return Task.todo(_clean_description(text))
        case TaskKind.DEADLINE | TaskKind.EVENT:
            segments = _split_dated(kind, text)
            if len(segments) != 2:
                raise DodoError(
                    ErrorKind.MALFORMED_TASK_INPUT,
                    f"expected '<description>{DATE_SEPARATORS[kind]}<YYYY-MM-DD>'",
                )
            description = _clean_description(segments[0])
            when = parse_date(segments[1])
            if kind is TaskKind.DEADLINE:
                return Task.deadline(description, when)
            return Task.event(description, when)

    raise ValueError(f"Unsupported task kind: {kind!r}")


def parse_index(raw: str, bound: int) -> int:
    """Parse a 1-based task number and check it against the list size."""
    text = (raw or "").strip()
    if not INDEX_RE.match(text):
        raise DodoError(ErrorKind.NOT_A_NUMBER, repr(text))
    value = int(text, 10)
    if value < 1 or value > bound:
        raise DodoError(ErrorKind.INDEX_OUT_OF_RANGE, f"{value} not in 1..{bound}")
    return value

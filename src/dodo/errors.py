# src/dodo/errors.py

"""
Error taxonomy shared by the parser, the store and the persistence adapter.

Every failure the user can trigger carries an ErrorKind. Core modules raise;
the command registry is the one place that turns errors into outcomes.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class ErrorKind(StrEnum):
    EMPTY_DESCRIPTION = "empty_description"
    UNRECOGNIZED_COMMAND = "unrecognized_command"
    MALFORMED_TASK_INPUT = "malformed_task_input"
    INVALID_DATE = "invalid_date"
    NOT_A_NUMBER = "not_a_number"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    CORRUPT_RECORD = "corrupt_record"
    IO_ERROR = "io_error"


class DodoError(Exception):
    """Base error: a kind plus optional human-readable detail."""

    def __init__(self, kind: ErrorKind, detail: str = "") -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(f"{kind.value}: {detail}" if detail else kind.value)


class CorruptRecordError(DodoError):
    """A persisted line that cannot be turned back into a task."""

    def __init__(self, line_number: int, line: str, reason: str = "") -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        detail = f"line {line_number}: {line!r}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(ErrorKind.CORRUPT_RECORD, detail)


class StorageError(DodoError):
    def __init__(self, path: str | Path, detail: str = "") -> None:
        self.path = Path(path)
        super().__init__(ErrorKind.IO_ERROR, detail or str(self.path))

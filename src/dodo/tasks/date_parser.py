# src/dodo/tasks/date_parser.py

from __future__ import annotations

import re
from datetime import date

from ..errors import DodoError, ErrorKind

DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def parse_date(raw: str) -> date:
    """
    Parse a calendar date written as YYYY-MM-DD.

    Surrounding whitespace is ignored. The shape is checked first, then the
    calendar: 2024-13-01 or 2023-02-29 are rejected, never clamped.
    """
    text = (raw or "").strip()
    if not DATE_RE.match(text):
        raise DodoError(ErrorKind.INVALID_DATE, f"expected YYYY-MM-DD, got {text!r}")
    try:
        return date(int(text[0:4]), int(text[5:7]), int(text[8:10]))
    except ValueError as e:
        raise DodoError(ErrorKind.INVALID_DATE, f"{text!r}: {e}") from e


def format_date(value: date) -> str:
    return value.isoformat()

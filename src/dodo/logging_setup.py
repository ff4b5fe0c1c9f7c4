# src/dodo/logging_setup.py

"""Log routing for the dodo REPL.

Replies to the user go to stdout through the console loop. Log records never
do: they go to stderr, and optionally to ``<log_dir>/dodo.log``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "dodo"
LOG_FILE_NAME = "dodo.log"


def _is_app_logger(name: str) -> bool:
    return name == APP_LOGGER or name.startswith(APP_LOGGER + ".")


class _ConsoleNoiseFilter(logging.Filter):
    """Pass every ``dodo.*`` record; anything else (library loggers, captured
    ``py.warnings``) reaches stderr only at ERROR or above."""

    def filter(self, record: logging.LogRecord) -> bool:
        return _is_app_logger(record.name) or record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path = ".local/dodo",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    log_to_file: bool = True,
) -> None:
    """Install the stderr handler and, if ``log_to_file``, the log file handler.

    Replaces whatever handlers the root logger already has, so calling it again
    reconfigures instead of doubling output.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(console_level)
    stderr_handler.setFormatter(fmt)
    stderr_handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(stderr_handler)

    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(log_path / LOG_FILE_NAME), encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    logging.captureWarnings(True)

# src/dodo/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file into AppState, then runs the console
REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from .. import ui
from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import DodoError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)

    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except DodoError as e:
        logger.error("Failed to load tasks from %s: %s", settings.tasks_path, e)
        print(ui.LOADING_ERROR)
        print(ui.error_message(e))
        sys.exit(1)

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()

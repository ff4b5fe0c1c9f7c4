# src/dodo/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from .. import ui
from ..cli.commands import Action
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive loop: one command per line until 'bye', EOF or Ctrl+C.

    read_line/write are injectable so the loop can be driven from tests.
    """
    logger.info("Console connector started (tasks=%d).", state.store.size())
    write(ui.GREETING)

    while True:
        try:
            line = read_line("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        try:
            outcome = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            write(ui.INTERNAL_ERROR)
            continue

        if outcome is None:
            continue

        write(ui.render(outcome))

        if outcome.action is Action.EXIT:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")

# src/tkit/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.engine import CommandEngine, block

logger = logging.getLogger(__name__)


def run_console_loop(
    engine: CommandEngine,
    *,
    app_name: str = "tkit",
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Read lines until `bye`, EOF or Ctrl+C; print one response block per line."""
    logger.info("Console connector started.")
    write(block(f"Hello from {app_name}!\nWhat can I do for you?"))
    if engine.startup_warning:
        write(block(engine.startup_warning))

    while True:
        try:
            line = read("> ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if not line.strip():
            continue

        write(engine.handle(line))
        if engine.is_exit(line):
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")

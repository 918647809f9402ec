# src/tkit/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the CommandEngine, then runs the console REPL.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_engine
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import configure_from_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    configure_from_settings(settings)

    logger.info("Starting %s...", settings.app_name)
    engine = create_engine(settings=settings)
    run_console_loop(engine, app_name=settings.app_name)
    logger.info("Bye.")


if __name__ == "__main__":
    main()

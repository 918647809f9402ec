# src/tkit/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it wires the concrete TaskStore into the
CommandEngine using the provided settings.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.engine import CommandEngine
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_engine(*, settings=None) -> CommandEngine:
    """
    Build the engine from settings (falls back to get_settings()).

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(settings.tasks_file, app_name=settings.app_name)
    engine = CommandEngine(store)
    logger.info("Engine created for %s", settings.tasks_file)
    return engine

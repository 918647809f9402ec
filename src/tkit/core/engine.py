# src/tkit/core/engine.py

"""
Command engine: the only entry point front ends need.

- handle(line) parses, validates, mutates the task list, persists after every
  mutation and returns a printable block; it never raises.
- is_exit(line) tells the front end when to stop its loop.
"""

from __future__ import annotations

import logging

from ..cli.commands import CommandRegistry, registry as default_registry
from ..tasks.task_list import TaskList
from .parser import Command, parse_line
from .ports import TaskRepo

logger = logging.getLogger(__name__)

DIVIDER = "____________________"


def block(body: str) -> str:
    return f"{DIVIDER}\n{body}\n{DIVIDER}"


class CommandEngine:
    def __init__(self, store: TaskRepo, *, registry: CommandRegistry | None = None) -> None:
        self._store = store
        self._registry = registry or default_registry
        self._tasks = TaskList(store.load())
        self.startup_warning: str | None = store.last_warning
        logger.info("CommandEngine ready tasks=%d", self._tasks.size())

    @property
    def tasks(self) -> TaskList:
        return self._tasks

    def is_exit(self, line: str | None) -> bool:
        return parse_line(line).command is Command.BYE

    def handle(self, line: str | None) -> str:
        raw = (line or "").strip()
        try:
            result = self._registry.handle(self._tasks, raw)
            body = result.reply
            if result.mutated:
                warning = self._store.save(self._tasks.view())
                if warning:
                    body = f"{body}\n{warning}"
        except Exception as exc:
            logger.exception("Command handler crashed for input %r", raw)
            body = f"Error: {exc}"
        return block(body)

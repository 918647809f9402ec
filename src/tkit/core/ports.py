# src/tkit/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The engine depends on this Protocol instead of the concrete TaskStore,
which keeps tests free to swap in an in-memory store.
"""

from collections.abc import Iterable
from typing import Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    last_warning: str | None

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> str | None: ...

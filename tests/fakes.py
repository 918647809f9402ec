# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable

from tkit.tasks.task_models import Task


class FakeTaskStore:
    """
    In-memory TaskRepo for engine tests.

    - Captures every saved snapshot for assertions
    - Can be told to fail saves or to crash on save
    """

    def __init__(
        self,
        initial: list[Task] | None = None,
        *,
        save_warning: str | None = None,
        crash_on_save: bool = False,
    ) -> None:
        self.initial = list(initial or [])
        self.saves: list[list[Task]] = []
        self.save_warning = save_warning
        self.crash_on_save = crash_on_save
        self.last_warning: str | None = None

    def load(self) -> list[Task]:
        return list(self.initial)

    def save(self, tasks: Iterable[Task]) -> str | None:
        if self.crash_on_save:
            raise RuntimeError("disk on fire")
        self.saves.append(list(tasks))
        return self.save_warning

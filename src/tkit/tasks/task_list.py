# src/tkit/tasks/task_list.py

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import assert_never

from ..core.dates import date_intersects
from .task_models import Deadline, Event, Task, Todo


class TaskList:
    """
    Ordered, in-memory collection of tasks.

    Indices are zero-based here; the command layer converts from the 1-based numbers
    users type. Invalid indices raise IndexError, so callers validate first.
    """

    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(initial or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def size(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def _check(self, idx: int) -> None:
        if not 0 <= idx < len(self._tasks):
            raise IndexError(f"task index out of range: {idx}")

    def get(self, idx: int) -> Task:
        self._check(idx)
        return self._tasks[idx]

    def view(self) -> tuple[Task, ...]:
        """Read-only snapshot of the current order."""
        return tuple(self._tasks)

    def add(self, task: Task) -> None:
        self._tasks.append(task)

    def remove_at(self, idx: int) -> Task:
        self._check(idx)
        return self._tasks.pop(idx)

    def remove_many(self, indices: Iterable[int]) -> list[Task]:
        """
        Remove several positions at once.

        Every index is validated before anything is removed. Duplicates collapse to the
        first occurrence. Removal runs from the highest index down so earlier pops do
        not shift later targets; the result follows the caller's order.
        """
        ordered = list(dict.fromkeys(indices))
        for idx in ordered:
            self._check(idx)

        removed = {idx: self._tasks.pop(idx) for idx in sorted(ordered, reverse=True)}
        return [removed[idx] for idx in ordered]

    def mark(self, idx: int) -> Task:
        task = self.get(idx)
        task.mark_done()
        return task

    def unmark(self, idx: int) -> Task:
        task = self.get(idx)
        task.mark_undone()
        return task

    def find(self, keyword: str | None) -> list[Task]:
        return [t for t in self._tasks if t.matches_keyword(keyword)]

    def on_date(self, day: date) -> list[Task]:
        """Deadlines due on `day` and events whose date range covers it."""
        hits: list[Task] = []
        for t in self._tasks:
            match t.payload:
                case Todo():
                    continue
                case Deadline(due_at=due_at):
                    if due_at.date() == day:
                        hits.append(t)
                case Event(start=start, end=end):
                    if date_intersects(day, start, end):
                        hits.append(t)
                case _:
                    assert_never(t.payload)
        return hits

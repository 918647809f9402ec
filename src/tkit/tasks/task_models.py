# src/tkit/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import assert_never

from ..core.dates import pretty


class TaskType(StrEnum):
    """Task category; the value is the single-letter tag used in display and storage."""

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


class TaskStatus(StrEnum):
    DONE = "done"
    NOT_DONE = "not_done"

    @property
    def icon(self) -> str:
        return "X" if self is TaskStatus.DONE else " "

    @property
    def flag(self) -> str:
        return "1" if self is TaskStatus.DONE else "0"

    @classmethod
    def from_flag(cls, raw: str) -> TaskStatus:
        if raw == "1":
            return cls.DONE
        if raw == "0":
            return cls.NOT_DONE
        raise ValueError(f"invalid done flag: {raw!r}")


@dataclass(frozen=True, slots=True)
class Todo:
    pass


@dataclass(frozen=True, slots=True)
class Deadline:
    due_at: datetime


@dataclass(frozen=True, slots=True)
class Event:
    # start > end is tolerated; only date queries normalize the range.
    start: datetime
    end: datetime


Payload = Todo | Deadline | Event


@dataclass(slots=True)
class Task:
    """
    One to-do, deadline or event.

    The description and payload are fixed at construction; only `status` changes,
    through mark_done() / mark_undone().
    """

    description: str
    payload: Payload
    status: TaskStatus = field(default=TaskStatus.NOT_DONE, init=False)

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("description is required")
        if "\n" in self.description or "\r" in self.description:
            raise ValueError("description must be a single line")
        match self.payload:
            case Todo():
                pass
            case Deadline(due_at=due_at):
                if not isinstance(due_at, datetime):
                    raise TypeError("deadline requires a datetime due_at")
            case Event(start=start, end=end):
                if not isinstance(start, datetime) or not isinstance(end, datetime):
                    raise TypeError("event requires datetime start and end")
            case _:
                raise TypeError(f"unsupported task payload: {self.payload!r}")

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(description, Todo())

    @classmethod
    def deadline(cls, description: str, due_at: datetime) -> Task:
        return cls(description, Deadline(due_at))

    @classmethod
    def event(cls, description: str, start: datetime, end: datetime) -> Task:
        return cls(description, Event(start, end))

    @property
    def kind(self) -> TaskType:
        match self.payload:
            case Todo():
                return TaskType.TODO
            case Deadline():
                return TaskType.DEADLINE
            case Event():
                return TaskType.EVENT
            case _:
                assert_never(self.payload)

    @property
    def is_done(self) -> bool:
        return self.status is TaskStatus.DONE

    def mark_done(self) -> None:
        self.status = TaskStatus.DONE

    def mark_undone(self) -> None:
        self.status = TaskStatus.NOT_DONE

    def matches_keyword(self, keyword: str | None) -> bool:
        """Case-insensitive substring match; a blank keyword never matches."""
        if keyword is None:
            return False
        needle = keyword.strip().casefold()
        if not needle:
            return False
        return needle in self.description.casefold()

    def render(self) -> str:
        head = f"[{self.kind.value}][{self.status.icon}] {self.description}"
        match self.payload:
            case Todo():
                return head
            case Deadline(due_at=due_at):
                return f"{head} (by: {pretty(due_at)})"
            case Event(start=start, end=end):
                return f"{head} (from: {pretty(start)} to: {pretty(end)})"
            case _:
                assert_never(self.payload)

    def __str__(self) -> str:
        return self.render()

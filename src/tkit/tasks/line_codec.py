# src/tkit/tasks/line_codec.py

"""
Single-line text encoding for tasks.

    T | 1 | read book
    D | 0 | return book | 2019-12-02T18:00
    E | 0 | project meeting | 2019-12-02T14:00 | 2019-12-02T16:00

Inside a field a literal backslash is written as \\\\ and a literal pipe as \\|.
"""

from __future__ import annotations

from datetime import datetime
from typing import assert_never

from ..core.dates import to_storage, try_parse_storage
from .task_models import Deadline, Event, Task, TaskStatus, TaskType, Todo

SEPARATOR = " | "


class CorruptedRecord(ValueError):
    """A stored line that cannot be turned back into a task."""


def escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("|", "\\|")


def unescape(text: str) -> str:
    out: list[str] = []
    escaping = False
    for ch in text:
        if escaping:
            out.append(ch)
            escaping = False
        elif ch == "\\":
            escaping = True
        else:
            out.append(ch)
    if escaping:
        # trailing lone backslash is literal
        out.append("\\")
    return "".join(out)


def split_fields(line: str) -> list[str]:
    """
    Split on unescaped pipes.

    Escape sequences are kept as-is so each raw field can be trimmed before it is
    unescaped.
    """
    fields: list[str] = []
    current: list[str] = []
    escaping = False
    for ch in line:
        if escaping:
            current.append(ch)
            escaping = False
        elif ch == "\\":
            current.append(ch)
            escaping = True
        elif ch == "|":
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields


def encode_task(task: Task) -> str:
    parts = [task.kind.value, task.status.flag, escape(task.description)]
    match task.payload:
        case Todo():
            pass
        case Deadline(due_at=due_at):
            parts.append(escape(to_storage(due_at)))
        case Event(start=start, end=end):
            parts.append(escape(to_storage(start)))
            parts.append(escape(to_storage(end)))
        case _:
            assert_never(task.payload)
    return SEPARATOR.join(parts)


def _date_field(fields: list[str], pos: int, line: str) -> datetime:
    dt = try_parse_storage(fields[pos])
    if dt is None:
        raise CorruptedRecord(f"bad date/time in field {pos + 1}: {line!r}")
    return dt


def decode_line(line: str) -> Task:
    """Decode one record; raises CorruptedRecord on any malformed input."""
    fields = [unescape(f.strip()) for f in split_fields(line.strip())]
    if len(fields) < 3:
        raise CorruptedRecord(f"too few fields: {line!r}")

    tag, flag, description = fields[0], fields[1], fields[2]
    if not description.strip():
        raise CorruptedRecord(f"empty description: {line!r}")

    try:
        kind = TaskType(tag)
    except ValueError:
        raise CorruptedRecord(f"unknown task type {tag!r}: {line!r}") from None

    match kind:
        case TaskType.TODO:
            task = Task.todo(description)
        case TaskType.DEADLINE:
            if len(fields) < 4:
                raise CorruptedRecord(f"deadline without a due date: {line!r}")
            task = Task.deadline(description, _date_field(fields, 3, line))
        case TaskType.EVENT:
            if len(fields) < 5:
                raise CorruptedRecord(f"event without both endpoints: {line!r}")
            task = Task.event(
                description, _date_field(fields, 3, line), _date_field(fields, 4, line)
            )
        case _:
            assert_never(kind)

    try:
        status = TaskStatus.from_flag(flag)
    except ValueError:
        raise CorruptedRecord(f"bad done flag {flag!r}: {line!r}") from None
    if status is TaskStatus.DONE:
        task.mark_done()
    return task

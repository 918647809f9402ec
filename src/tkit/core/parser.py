# src/tkit/core/parser.py

"""Split raw input lines into a command keyword and the remainder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Command(StrEnum):
    BYE = "bye"
    LIST = "list"
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    MARK = "mark"
    UNMARK = "unmark"
    DELETE = "delete"
    ON = "on"
    FIND = "find"
    UNKNOWN = ""

    @classmethod
    def from_input(cls, token: str | None) -> Command:
        s = (token or "").lower()
        if not s:
            return cls.UNKNOWN
        try:
            return cls(s)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class SplitCommand:
    command: Command
    remainder: str = ""


def parse_line(line: str | None) -> SplitCommand:
    """
    Trim, split on the first whitespace run and classify the first token.

    Keywords are case-insensitive; the remainder is kept verbatim.
    """
    normalized = (line or "").strip()
    if not normalized:
        return SplitCommand(Command.UNKNOWN)
    parts = normalized.split(maxsplit=1)
    rest = parts[1] if len(parts) > 1 else ""
    return SplitCommand(Command.from_input(parts[0]), rest)

# src/tkit/core/dates.py

"""
Date/time parsing and formatting.

Accepted user input:
- 2019-12-02
- 2019-12-02 1800
- 2/12/2019
- 2/12/2019 1800

Storage uses ISO-8601 (2019-12-02T18:00). Display is "Dec 2 2019", or
"Dec 2 2019 18:00" when the time is not midnight.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time

_ISO_INPUT = re.compile(r"(\d{4})-(\d{2})-(\d{2})(?: (\d{2})(\d{2}))?", re.ASCII)
_SLASH_INPUT = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})(?: (\d{2})(\d{2}))?", re.ASCII)
_STORAGE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2}(?:\.\d{1,6})?)?", re.ASCII)

# Month names are fixed so output does not depend on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


class UnrecognizedFormat(ValueError):
    """Raised when a date/time string matches none of the accepted shapes."""


def _build(
    year: str, month: str, day: str, hour: str | None, minute: str | None
) -> datetime | None:
    try:
        d = date(int(year), int(month), int(day))
        t = time(int(hour), int(minute)) if hour is not None else time(0, 0)
    except ValueError:
        return None
    return datetime.combine(d, t)


def try_parse_input(text: str | None) -> datetime | None:
    """Non-throwing variant of parse_input(); returns None on failure."""
    if text is None:
        return None
    s = text.strip()

    m = _ISO_INPUT.fullmatch(s)
    if m:
        year, month, day, hour, minute = m.groups()
        return _build(year, month, day, hour, minute)

    m = _SLASH_INPUT.fullmatch(s)
    if m:
        day, month, year, hour, minute = m.groups()
        return _build(year, month, day, hour, minute)

    return None


def parse_input(text: str) -> datetime:
    """
    Parse user input in "YYYY-MM-DD[ HHmm]" or "D/M/YYYY[ HHmm]" form.

    A missing time means midnight.
    """
    dt = try_parse_input(text)
    if dt is None:
        raise UnrecognizedFormat(
            f'I do not understand this date/time format: "{text}"\n'
            "Examples: 2019-12-02 1800  |  2019-12-02  |  2/12/2019 1800"
        )
    return dt


def try_parse_date(text: str | None) -> date | None:
    dt = try_parse_input(text)
    return dt.date() if dt is not None else None


def to_storage(dt: datetime) -> str:
    """Lossless ISO form; seconds only appear when they carry information."""
    if dt.second == 0 and dt.microsecond == 0:
        return dt.isoformat(timespec="minutes")
    return dt.isoformat()


def try_parse_storage(text: str | None) -> datetime | None:
    """Strict storage parse, falling back to the user input shapes."""
    if text is None:
        return None
    s = text.strip()
    if _STORAGE.fullmatch(s):
        try:
            return datetime.fromisoformat(s)
        except ValueError:
            return None
    return try_parse_input(s)


def parse_storage(text: str) -> datetime:
    dt = try_parse_storage(text)
    if dt is None:
        raise UnrecognizedFormat(f'Unrecognized stored date/time: "{text}"')
    return dt


def pretty_date(d: date) -> str:
    return f"{_MONTHS[d.month - 1]} {d.day} {d.year}"


def pretty(dt: datetime) -> str:
    """Human display: omit the time when it is exactly midnight."""
    if dt.time() == time(0, 0):
        return pretty_date(dt.date())
    return f"{pretty_date(dt.date())} {dt:%H:%M}"


def date_intersects(day: date, start: datetime, end: datetime) -> bool:
    """
    True if `day` lies within [start, end] by calendar date (inclusive).

    Inverted ranges are swapped before comparison; the caller's values are untouched.
    """
    if start > end:
        start, end = end, start
    return start.date() <= day <= end.date()

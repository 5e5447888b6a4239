"""Calendar-date helpers using the dd/mm/yyyy text form."""

from __future__ import annotations

import re
from datetime import date, timedelta

_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)/\s*([+-]?\d+)/\s*([+-]?\d+)")


def today() -> date:
    """Return the current local date."""
    return date.today()


def parse_date(text: str) -> date:
    """Parse a ``dd/mm/yyyy`` string into a date.

    Raises ValueError when the text is not in that form or names no real day.
    """
    match = _DATE_PATTERN.match(text)
    if match is None:
        raise ValueError(f"not a dd/mm/yyyy date: {text!r}")
    day, month, year = (int(group) for group in match.groups())
    return date(year, month, day)


def format_date(value: date) -> str:
    """Render a date as ``dd/mm/yyyy`` with zero-padded day and month."""
    return f"{value.day:02d}/{value.month:02d}/{value.year}"


def add_days(value: date, days: int) -> date:
    """Return the date ``days`` days after ``value`` (before, if negative)."""
    return value + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Return the number of whole days from ``start`` to ``end``."""
    return (end - start).days
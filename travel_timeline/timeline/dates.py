"""Strict ISO calendar date parsing for travel entries."""

from __future__ import annotations

import re
from datetime import date

from ..domain.errors import ParseError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_entry_date(value: str, entry_id: str) -> date:
    """Parse a ``YYYY-MM-DD`` date recorded on an entry.

    Args:
        value: The raw date string.
        entry_id: Identifier of the entry carrying the value.

    Returns:
        The parsed date.

    Raises:
        ParseError: If the value is not a valid ISO calendar date.
    """
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ParseError(
            f"Entry {entry_id} has a malformed date {value!r}",
            entry_id=entry_id,
            value=str(value),
        )
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ParseError(
            f"Entry {entry_id} has an invalid date {value!r}",
            entry_id=entry_id,
            value=value,
            cause=e,
        )


def days_between(start: str, end: str, entry_id: str) -> int:
    """Return the number of whole days from ``start`` to ``end``."""
    return (parse_entry_date(end, entry_id) - parse_entry_date(start, entry_id)).days

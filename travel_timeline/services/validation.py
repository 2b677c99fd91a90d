"""Entry validation applied by the host before storing entries.

The timeline core accepts any well-formed dates. Inverted ranges and
blank places are data-quality problems the host rejects at the door.
"""

from __future__ import annotations

from ..domain.errors import EntryValidationError
from ..domain.models import TravelEntry
from ..timeline.dates import parse_entry_date


def validate_entry(entry: TravelEntry) -> TravelEntry:
    """Check an entry before it is stored.

    Returns:
        The entry unchanged.

    Raises:
        ParseError: If a date is malformed.
        EntryValidationError: If a place is blank or the exit date
            precedes the entry date.
    """
    if not entry.country.strip():
        raise EntryValidationError(
            f"Entry {entry.id} has no country", entry_id=entry.id, field_name="country"
        )
    if not entry.city.strip():
        raise EntryValidationError(
            f"Entry {entry.id} has no city", entry_id=entry.id, field_name="city"
        )

    entry_day = parse_entry_date(entry.entry_date, entry.id)
    if entry.exit_date:
        exit_day = parse_entry_date(entry.exit_date, entry.id)
        if exit_day < entry_day:
            raise EntryValidationError(
                f"Entry {entry.id} exits on {entry.exit_date}, "
                f"before its entry date {entry.entry_date}",
                entry_id=entry.id,
                field_name="exit_date",
            )
    return entry

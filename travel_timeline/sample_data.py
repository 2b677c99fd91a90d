"""Sample travels shown on first run, before anything is stored."""

from __future__ import annotations

from .domain.models import TravelEntry

SAMPLE_TRAVELS: tuple[TravelEntry, ...] = (
    TravelEntry(
        id="1",
        country="United States",
        city="New York",
        entry_date="2023-01-15",
        flag_code="us",
    ),
    TravelEntry(
        id="2",
        country="Japan",
        city="Tokyo",
        entry_date="2023-02-02",
        flag_code="jp",
    ),
    TravelEntry(
        id="3",
        country="Singapore",
        city="Singapore",
        entry_date="2023-02-16",
        is_home=True,
        flag_code="sg",
    ),
    TravelEntry(
        id="4",
        country="France",
        city="Paris",
        entry_date="2023-05-01",
        flag_code="fr",
    ),
    TravelEntry(
        id="5",
        country="Singapore",
        city="Singapore",
        entry_date="2023-05-16",
        is_home=True,
        flag_code="sg",
    ),
)

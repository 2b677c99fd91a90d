"""Day counts and titles derived from journeys for display."""

from __future__ import annotations

from typing import Sequence

from ..domain.models import (
    EntryTimeline,
    Journey,
    JourneyTimeline,
    TimelineView,
    TravelEntry,
)
from .dates import days_between
from .partitioner import JourneyPartitioner
from .resolver import EntryDateResolver, sort_entries


def _entry_timeline(
    entry: TravelEntry,
    ordered: Sequence[TravelEntry],
    resolver: EntryDateResolver,
) -> EntryTimeline:
    exit_date = resolver.effective_exit_date_sorted(entry, ordered)
    return EntryTimeline(
        entry=entry,
        effective_exit_date=exit_date,
        duration_days=days_between(entry.entry_date, exit_date, entry.id),
    )


def _total_days(rows: Sequence[EntryTimeline]) -> int:
    return sum(row.duration_days for row in rows if not row.entry.is_home)


def entry_duration_days(
    entry: TravelEntry,
    all_entries: Sequence[TravelEntry],
    resolver: EntryDateResolver,
) -> int:
    """Return the days between an entry's start and its effective exit.

    Negative for an entry whose recorded exit precedes its entry date.
    """
    return _entry_timeline(entry, sort_entries(all_entries), resolver).duration_days


def journey_total_days(
    journey: Journey,
    all_entries: Sequence[TravelEntry],
    resolver: EntryDateResolver,
) -> int:
    """Sum the durations of the journey's trips away from home."""
    ordered = sort_entries(all_entries)
    return _total_days([_entry_timeline(trip, ordered, resolver) for trip in journey.trips])


def journey_title(journey: Journey) -> str:
    """Return "Journey to X" for one trip, "Journey through X, Y" otherwise."""
    countries = ", ".join(journey.countries)
    if len(journey.trips) == 1:
        return f"Journey to {countries}"
    return f"Journey through {countries}"


def build_timeline(
    entries: Sequence[TravelEntry],
    partitioner: JourneyPartitioner,
) -> TimelineView:
    """Derive the full display timeline for ``entries``."""
    resolver = partitioner.resolver
    ordered = sort_entries(entries)
    journeys = []

    for journey in partitioner.group_into_journeys(ordered):
        rows = tuple(_entry_timeline(trip, ordered, resolver) for trip in journey.trips)
        journeys.append(
            JourneyTimeline(
                journey=journey,
                title=journey_title(journey),
                total_days=_total_days(rows),
                entries=rows,
            )
        )

    return TimelineView(journeys=tuple(journeys))

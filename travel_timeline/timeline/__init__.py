"""Timeline core - journey grouping and exit date resolution.

Pure functions over travel entries. The only outside input is the
clock used for the exit date of the ongoing most recent entry.
"""

from .dates import days_between, parse_entry_date
from .durations import (
    build_timeline,
    entry_duration_days,
    journey_title,
    journey_total_days,
)
from .partitioner import JourneyPartitioner, group_into_journeys
from .resolver import EntryDateResolver, effective_exit_date, sort_entries

__all__ = [
    "EntryDateResolver",
    "JourneyPartitioner",
    "effective_exit_date",
    "group_into_journeys",
    "sort_entries",
    "parse_entry_date",
    "days_between",
    "entry_duration_days",
    "journey_total_days",
    "journey_title",
    "build_timeline",
]

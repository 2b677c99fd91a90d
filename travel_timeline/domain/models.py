"""Immutable domain models for the Travel Timeline.

All models are frozen dataclasses with slots. Dates are kept as ISO
8601 strings (``YYYY-MM-DD``) the way the user records them; parsing
happens in ``timeline.dates`` so that a malformed value can be reported
against the entry that carries it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Theme(str, Enum):
    """Display theme stored on the user profile."""

    LIGHT = "light"
    DARK = "dark"


@dataclass(frozen=True, slots=True)
class HomeLocation:
    """The user's home base, copied onto every home entry.

    Attributes:
        country: Country name
        city: City name
        flag_code: Lower-case ISO 3166 alpha-2 code used for flags
    """

    country: str = "United Kingdom"
    city: str = "London"
    flag_code: str = "gb"


@dataclass(frozen=True, slots=True)
class TravelEntry:
    """One recorded stay in a country.

    Attributes:
        id: Unique, caller-assigned identifier (never reused)
        country: Country name
        city: City name
        entry_date: ISO date the stay started
        exit_date: ISO date the stay ended, None or "" when open-ended
        is_home: Whether this entry is a return to the home base
        flag_code: Display-only flag identifier
    """

    id: str
    country: str
    city: str
    entry_date: str
    exit_date: Optional[str] = None
    is_home: bool = False
    flag_code: str = ""

    @property
    def has_exit_date(self) -> bool:
        """Check if an explicit exit date was recorded."""
        return bool(self.exit_date)


@dataclass(frozen=True, slots=True)
class Journey:
    """A run of entries closed by a return home.

    The id is positional (``journey-1``, ``journey-2``...) and regenerated
    every time entries are grouped. It must not be stored or compared
    across calls.

    Attributes:
        id: Positional synthetic identifier
        trips: Member entries, ascending by entry date
        start_date: Entry date of the first trip
        end_date: Effective exit date of the last trip
    """

    id: str
    trips: tuple[TravelEntry, ...]
    start_date: str
    end_date: str

    @property
    def is_open(self) -> bool:
        """Check if the journey has not ended with a return home."""
        return not self.trips[-1].is_home

    @property
    def countries(self) -> tuple[str, ...]:
        """Return the country of each trip in order."""
        return tuple(trip.country for trip in self.trips)


@dataclass(frozen=True, slots=True)
class UserProfile:
    """The single local user of the application.

    Attributes:
        id: Profile identifier, also used to key stored travels
        name: Display name
        email: Contact e-mail
        theme: Preferred display theme
        home_location: Home base applied to home entries
        created_at: ISO timestamp of creation
        updated_at: ISO timestamp of the last save
    """

    id: str
    name: str = ""
    email: str = ""
    theme: Theme = Theme.LIGHT
    home_location: HomeLocation = field(default_factory=HomeLocation)
    created_at: str = ""
    updated_at: str = ""


@dataclass(frozen=True, slots=True)
class ExportBundle:
    """Everything the user can export or import in one file."""

    profile: Optional[UserProfile] = None
    travels: tuple[TravelEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class EntryTimeline:
    """Display data derived for a single entry.

    Attributes:
        entry: The underlying entry
        effective_exit_date: Recorded or inferred exit date
        duration_days: Days between entry and effective exit
    """

    entry: TravelEntry
    effective_exit_date: str
    duration_days: int


@dataclass(frozen=True, slots=True)
class JourneyTimeline:
    """Display data derived for a journey."""

    journey: Journey
    title: str
    total_days: int
    entries: tuple[EntryTimeline, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class TimelineView:
    """The full derived timeline, in chronological order."""

    journeys: tuple[JourneyTimeline, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        """Check if there is nothing to display."""
        return len(self.journeys) == 0

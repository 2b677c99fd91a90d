"""Timeline service - Use cases of the travel timeline host.

This service owns the single user profile and the list of travel
entries. Every mutation is validated, written through the injected
storage and logged; the derived journeys are recomputed from the
stored entries on every request.
"""

from __future__ import annotations

import dataclasses
import logging
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from ..domain.errors import EntryNotFoundError
from ..domain.models import (
    ExportBundle,
    HomeLocation,
    Journey,
    Theme,
    TimelineView,
    TravelEntry,
    UserProfile,
)
from ..ports.storage import StoragePort
from ..sample_data import SAMPLE_TRAVELS
from ..timeline.durations import build_timeline
from ..timeline.partitioner import JourneyPartitioner
from .import_export import export_text, parse_import
from .validation import validate_entry


@dataclass
class TimelineService:
    """Main service for recording travels and deriving the timeline.

    Attributes:
        storage: Persistence backend chosen at startup
        partitioner: Groups entries into journeys
        seed_sample_data: Store the sample travels when a profile is first created
        default_home: Home location given to a newly created profile
    """

    storage: StoragePort
    partitioner: JourneyPartitioner = field(default_factory=JourneyPartitioner)
    seed_sample_data: bool = True
    default_home: Optional[HomeLocation] = None

    _profile: Optional[UserProfile] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> UserProfile:
        """Load the profile, creating it (and sample travels) on first run.

        Returns:
            The current profile.
        """
        profile = self.storage.get_profile()
        if profile is None:
            profile = self.storage.create_profile(home_location=self.default_home)
            self._logger.info("First run, profile created", extra={"profile_id": profile.id})
            if self.seed_sample_data:
                self.storage.save_travels(profile.id, SAMPLE_TRAVELS)
                self._logger.info(
                    "Sample travels stored",
                    extra={"entries": len(SAMPLE_TRAVELS)},
                )
        self._profile = profile
        return profile

    @property
    def profile(self) -> UserProfile:
        if self._profile is None:
            return self.load()
        return self._profile

    def list_entries(self) -> List[TravelEntry]:
        return self.storage.get_travels(self.profile.id)

    def get_entry(self, entry_id: str) -> TravelEntry:
        """Return the stored entry with ``entry_id``.

        Raises:
            EntryNotFoundError: If no entry has that id.
        """
        for entry in self.list_entries():
            if entry.id == entry_id:
                return entry
        raise EntryNotFoundError(f"No entry with id {entry_id}", entry_id=entry_id)

    def add_entry(
        self,
        country: str,
        city: str,
        entry_date: str,
        exit_date: Optional[str] = None,
        is_home: bool = False,
        flag_code: str = "",
    ) -> TravelEntry:
        """Record a new entry under a freshly generated id.

        Home entries take their place from the profile's home location.

        Raises:
            ParseError: If a date is malformed.
            EntryValidationError: If the entry is rejected.
        """
        entry = self._apply_home(
            TravelEntry(
                id=uuid.uuid4().hex,
                country=country,
                city=city,
                entry_date=entry_date,
                exit_date=exit_date or None,
                is_home=is_home,
                flag_code=flag_code,
            )
        )
        validate_entry(entry)

        entries = self.list_entries()
        entries.append(entry)
        self.storage.save_travels(self.profile.id, entries)
        self._logger.info(
            "Entry added",
            extra={"entry_id": entry.id, "entry_date": entry.entry_date, "is_home": is_home},
        )
        return entry

    def update_entry(self, updated: TravelEntry) -> TravelEntry:
        """Replace the stored entry that has the same id.

        Raises:
            EntryNotFoundError: If no entry has that id.
            EntryValidationError: If the entry is rejected.
        """
        updated = self._apply_home(updated)
        validate_entry(updated)

        entries = self.list_entries()
        ids = [e.id for e in entries]
        if updated.id not in ids:
            raise EntryNotFoundError(f"No entry with id {updated.id}", entry_id=updated.id)

        entries[ids.index(updated.id)] = updated
        self.storage.save_travels(self.profile.id, entries)
        self._logger.info("Entry updated", extra={"entry_id": updated.id})
        return updated

    def delete_entry(self, entry_id: str) -> None:
        """Delete the stored entry with ``entry_id``.

        Raises:
            EntryNotFoundError: If no entry has that id.
        """
        entries = self.list_entries()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            raise EntryNotFoundError(f"No entry with id {entry_id}", entry_id=entry_id)

        self.storage.save_travels(self.profile.id, remaining)
        self._logger.info("Entry deleted", extra={"entry_id": entry_id})

    def set_home_location(self, home: HomeLocation) -> UserProfile:
        """Change the home location and move every home entry to it."""
        profile = self.storage.save_profile(
            dataclasses.replace(self.profile, home_location=home)
        )
        self._profile = profile

        entries = [self._apply_home(e) for e in self.list_entries()]
        self.storage.save_travels(profile.id, entries)
        self._logger.info(
            "Home location changed",
            extra={"country": home.country, "city": home.city},
        )
        return profile

    def set_theme(self, theme: Theme) -> UserProfile:
        self._profile = self.storage.save_profile(
            dataclasses.replace(self.profile, theme=theme)
        )
        return self._profile

    def update_profile(
        self, name: Optional[str] = None, email: Optional[str] = None
    ) -> UserProfile:
        changes = {}
        if name is not None:
            changes["name"] = name
        if email is not None:
            changes["email"] = email
        self._profile = self.storage.save_profile(
            dataclasses.replace(self.profile, **changes)
        )
        return self._profile

    def journeys(self) -> List[Journey]:
        return self.partitioner.group_into_journeys(self.list_entries())

    def timeline(self) -> TimelineView:
        return build_timeline(self.list_entries(), self.partitioner)

    def import_text(self, text: str) -> int:
        """Import an exported file into the current profile.

        A bare entry list replaces the stored entries. A bundle also
        applies the profile's name, e-mail, theme and home location;
        its travels replace the stored entries when it has any.

        Returns:
            Number of imported entries.

        Raises:
            ImportFormatError: If the content is not valid timeline data.
        """
        bundle = parse_import(text)
        current = self.profile

        if bundle.profile is None:
            self.storage.save_travels(current.id, bundle.travels)
        else:
            merged = dataclasses.replace(
                current,
                name=bundle.profile.name,
                email=bundle.profile.email,
                theme=bundle.profile.theme,
                home_location=bundle.profile.home_location,
            )
            self.storage.import_data(ExportBundle(profile=merged, travels=bundle.travels))
            self._profile = self.storage.get_profile()

        self._logger.info(
            "Timeline imported",
            extra={"entries": len(bundle.travels), "with_profile": bundle.profile is not None},
        )
        return len(bundle.travels)

    def export_text(self, include_profile: bool = False) -> str:
        """Serialize the stored timeline for export."""
        bundle = self.storage.export_data(self.profile.id)
        return export_text(bundle, include_profile=include_profile)

    def _apply_home(self, entry: TravelEntry) -> TravelEntry:
        if not entry.is_home:
            return entry
        home = self.profile.home_location
        return dataclasses.replace(
            entry, country=home.country, city=home.city, flag_code=home.flag_code
        )

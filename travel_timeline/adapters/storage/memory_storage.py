"""In-memory storage for testing and throwaway sessions.

Nothing survives the process. Use this storage in test fixtures to
keep tests isolated from the user's data directory.

Example:
    @pytest.fixture
    def service(memory_storage, clock):
        return TimelineService(storage=memory_storage, clock=clock)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ...domain.models import ExportBundle, HomeLocation, Theme, TravelEntry, UserProfile
from ._profiles import new_profile, touched


@dataclass
class InMemoryStorage:
    """Dict-backed storage adapter implementing StoragePort."""

    _profile: Optional[UserProfile] = field(default=None, repr=False)
    _travels: Dict[str, List[TravelEntry]] = field(default_factory=dict, repr=False)

    def get_profile(self) -> Optional[UserProfile]:
        return self._profile

    def save_profile(self, profile: UserProfile) -> UserProfile:
        self._profile = touched(profile)
        return self._profile

    def create_profile(
        self,
        name: str = "",
        email: str = "",
        theme: Optional[Theme] = None,
        home_location: Optional[HomeLocation] = None,
    ) -> UserProfile:
        self._profile = new_profile(name, email, theme, home_location)
        return self._profile

    def get_travels(self, user_id: str) -> list[TravelEntry]:
        return list(self._travels.get(user_id, []))

    def save_travels(self, user_id: str, travels: Sequence[TravelEntry]) -> None:
        self._travels[user_id] = list(travels)

    def export_data(self, user_id: str) -> ExportBundle:
        return ExportBundle(
            profile=self._profile,
            travels=tuple(self.get_travels(user_id)),
        )

    def import_data(self, bundle: ExportBundle) -> None:
        if bundle.profile:
            self.save_profile(bundle.profile)
            if bundle.travels:
                self.save_travels(bundle.profile.id, bundle.travels)

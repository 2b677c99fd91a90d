"""Storage port - Persistence of the profile and travel entries.

The backend is chosen once at startup by the container and injected
into the services that need it. Local and database backends expose the
same shape, so callers never know which one they are talking to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import (
        ExportBundle,
        HomeLocation,
        Theme,
        TravelEntry,
        UserProfile,
    )


class StoragePort(Protocol):
    """Port for profile and travel persistence.

    Implementations:
    - adapters/storage/json_storage.py (JsonFileStorage) - Local key-value store
    - adapters/storage/sqlalchemy_storage.py (SqlAlchemyStorage) - Database
    - adapters/storage/memory_storage.py (InMemoryStorage) - Testing
    """

    def get_profile(self) -> Optional[UserProfile]:
        """Load the stored profile.

        Returns:
            The profile, or None if none has been created yet.
        """
        ...

    def save_profile(self, profile: UserProfile) -> UserProfile:
        """Store a profile, refreshing its ``updated_at`` timestamp.

        Args:
            profile: The profile to store.

        Returns:
            The profile as stored.
        """
        ...

    def create_profile(
        self,
        name: str = "",
        email: str = "",
        theme: Optional[Theme] = None,
        home_location: Optional[HomeLocation] = None,
    ) -> UserProfile:
        """Create and store a new profile with a fresh identifier.

        Returns:
            The created profile.
        """
        ...

    def get_travels(self, user_id: str) -> list[TravelEntry]:
        """Load the travel entries stored for a user.

        Args:
            user_id: Identifier of the owning profile.

        Returns:
            The stored entries (empty if none).
        """
        ...

    def save_travels(self, user_id: str, travels: Sequence[TravelEntry]) -> None:
        """Replace the travel entries stored for a user.

        Args:
            user_id: Identifier of the owning profile.
            travels: The complete new list of entries.
        """
        ...

    def export_data(self, user_id: str) -> ExportBundle:
        """Collect the profile and the user's travels.

        Args:
            user_id: Identifier of the owning profile.

        Returns:
            Bundle with the profile and travels.
        """
        ...

    def import_data(self, bundle: ExportBundle) -> None:
        """Store the contents of a bundle.

        The profile is saved when present. Travels are saved only when
        the bundle also carries a profile to own them.

        Args:
            bundle: The bundle to store.
        """
        ...

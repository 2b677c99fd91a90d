"""Local key-value storage backed by JSON files.

Each key is stored as one ``<key>.json`` file in the data directory:
- ``travel_timeline_user_profile``: the profile object
- ``travel_timeline_travels``: the list of travel entries

The local store holds a single user, so travels are not partitioned by
user id. Files are opened and closed on every read and write; a write
goes to a temporary file in the data directory that then replaces the
key file, so a failed write leaves the previous contents in place.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from ...domain.errors import StorageError
from ...domain.models import ExportBundle, HomeLocation, Theme, TravelEntry, UserProfile
from ...schemas import ProfileRecord, TravelEntryRecord
from ._profiles import new_profile, touched

PROFILE_KEY = "travel_timeline_user_profile"
TRAVELS_KEY = "travel_timeline_travels"


@dataclass
class JsonFileStorage:
    """Storage adapter writing JSON documents into a directory.

    This adapter implements StoragePort.

    Attributes:
        data_dir: Directory holding one JSON file per key
    """

    data_dir: Path

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)
        self._logger = logging.getLogger(__name__)

    def get_profile(self) -> Optional[UserProfile]:
        raw = self._read(PROFILE_KEY)
        if raw is None:
            return None
        try:
            return ProfileRecord.model_validate(raw).to_domain()
        except ValidationError as e:
            raise StorageError(
                "Stored profile is corrupt", backend="local", cause=e
            )

    def save_profile(self, profile: UserProfile) -> UserProfile:
        stored = touched(profile)
        self._write(PROFILE_KEY, ProfileRecord.from_domain(stored).to_wire())
        return stored

    def create_profile(
        self,
        name: str = "",
        email: str = "",
        theme: Optional[Theme] = None,
        home_location: Optional[HomeLocation] = None,
    ) -> UserProfile:
        profile = new_profile(name, email, theme, home_location)
        self._write(PROFILE_KEY, ProfileRecord.from_domain(profile).to_wire())
        self._logger.info("Profile created", extra={"profile_id": profile.id})
        return profile

    def get_travels(self, user_id: str) -> list[TravelEntry]:
        raw = self._read(TRAVELS_KEY)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise StorageError("Stored travels are not a list", backend="local")
        try:
            return [TravelEntryRecord.model_validate(item).to_domain() for item in raw]
        except ValidationError as e:
            raise StorageError(
                "Stored travels are corrupt", backend="local", cause=e
            )

    def save_travels(self, user_id: str, travels: Sequence[TravelEntry]) -> None:
        self._write(
            TRAVELS_KEY,
            [TravelEntryRecord.from_domain(t).to_wire() for t in travels],
        )

    def export_data(self, user_id: str) -> ExportBundle:
        return ExportBundle(
            profile=self.get_profile(),
            travels=tuple(self.get_travels(user_id)),
        )

    def import_data(self, bundle: ExportBundle) -> None:
        if bundle.profile:
            self.save_profile(bundle.profile)
            if bundle.travels:
                self.save_travels(bundle.profile.id, bundle.travels)

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}.json"

    def _read(self, key: str) -> Any:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            with path.open(encoding="utf-8") as f:
                value = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(
                f"Failed to read {key}", backend="local", cause=e
            )
        self._logger.debug("Key read", extra={"key": key, "path": str(path)})
        return value

    def _write(self, key: str, value: Any) -> None:
        path = self._path(key)
        tmp_name: Optional[str] = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.data_dir,
                prefix=f".{key}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                json.dump(value, f, indent=2)
            os.replace(tmp_name, path)
        except OSError as e:
            raise StorageError(
                f"Failed to write {key}", backend="local", cause=e
            )
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        self._logger.debug("Key written", extra={"key": key, "path": str(path)})

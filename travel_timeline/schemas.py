"""Wire schemas for stored and exported timeline data.

Files written by the local store and by export use camelCase keys
(``entryDate``, ``isHome``, ``homeLocation``...) so that exports stay
interchangeable with the timeline files users already have. These
pydantic models validate that format and convert it to and from the
frozen domain models.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .domain.models import ExportBundle, HomeLocation, Theme, TravelEntry, UserProfile


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TravelEntryRecord(_CamelModel):
    id: str
    country: str
    city: str
    entry_date: str
    exit_date: Optional[str] = None
    is_home: bool = False
    flag_code: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("exit_date", mode="before")
    @classmethod
    def _blank_exit_is_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value

    @field_validator("is_home", mode="before")
    @classmethod
    def _missing_home_is_false(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("flag_code", mode="before")
    @classmethod
    def _missing_flag_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @classmethod
    def from_domain(cls, entry: TravelEntry) -> TravelEntryRecord:
        return cls(
            id=entry.id,
            country=entry.country,
            city=entry.city,
            entry_date=entry.entry_date,
            exit_date=entry.exit_date or None,
            is_home=entry.is_home,
            flag_code=entry.flag_code,
        )

    def to_domain(self) -> TravelEntry:
        return TravelEntry(
            id=self.id,
            country=self.country,
            city=self.city,
            entry_date=self.entry_date,
            exit_date=self.exit_date,
            is_home=self.is_home,
            flag_code=self.flag_code,
        )


class HomeLocationRecord(_CamelModel):
    country: str = "United Kingdom"
    city: str = "London"
    flag_code: str = "gb"

    @classmethod
    def from_domain(cls, home: HomeLocation) -> HomeLocationRecord:
        return cls(country=home.country, city=home.city, flag_code=home.flag_code)

    def to_domain(self) -> HomeLocation:
        return HomeLocation(country=self.country, city=self.city, flag_code=self.flag_code)


class ProfileRecord(_CamelModel):
    id: str
    name: str = ""
    email: str = ""
    theme: Theme = Theme.LIGHT
    home_location: HomeLocationRecord = Field(default_factory=HomeLocationRecord)
    created_at: str = ""
    updated_at: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_domain(cls, profile: UserProfile) -> ProfileRecord:
        return cls(
            id=profile.id,
            name=profile.name,
            email=profile.email,
            theme=profile.theme,
            home_location=HomeLocationRecord.from_domain(profile.home_location),
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )

    def to_domain(self) -> UserProfile:
        return UserProfile(
            id=self.id,
            name=self.name,
            email=self.email,
            theme=self.theme,
            home_location=self.home_location.to_domain(),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class BundleRecord(_CamelModel):
    profile: Optional[ProfileRecord] = None
    travels: List[TravelEntryRecord] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, bundle: ExportBundle) -> BundleRecord:
        return cls(
            profile=ProfileRecord.from_domain(bundle.profile) if bundle.profile else None,
            travels=[TravelEntryRecord.from_domain(t) for t in bundle.travels],
        )

    def to_domain(self) -> ExportBundle:
        return ExportBundle(
            profile=self.profile.to_domain() if self.profile else None,
            travels=tuple(t.to_domain() for t in self.travels),
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "profile": self.profile.to_wire() if self.profile else None,
            "travels": [t.to_wire() for t in self.travels],
        }

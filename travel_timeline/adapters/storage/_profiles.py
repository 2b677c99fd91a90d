"""Profile construction shared by the storage adapters."""

from __future__ import annotations

import dataclasses
import uuid
from datetime import datetime, timezone
from typing import Optional

from ...domain.models import HomeLocation, Theme, UserProfile


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_profile(
    name: str = "",
    email: str = "",
    theme: Optional[Theme] = None,
    home_location: Optional[HomeLocation] = None,
    profile_id: Optional[str] = None,
) -> UserProfile:
    """Build a profile with a fresh id and matching timestamps."""
    now = utcnow_iso()
    return UserProfile(
        id=profile_id or uuid.uuid4().hex,
        name=name,
        email=email,
        theme=theme or Theme.LIGHT,
        home_location=home_location or HomeLocation(),
        created_at=now,
        updated_at=now,
    )


def touched(profile: UserProfile) -> UserProfile:
    """Return ``profile`` with ``updated_at`` set to now."""
    return dataclasses.replace(profile, updated_at=utcnow_iso())

"""Shared fixtures for the travel timeline tests."""

from __future__ import annotations

from datetime import date
from typing import Callable, Optional

import pytest

from travel_timeline.adapters.clock import FixedClock
from travel_timeline.adapters.storage import InMemoryStorage
from travel_timeline.domain.models import HomeLocation, TravelEntry
from travel_timeline.sample_data import SAMPLE_TRAVELS
from travel_timeline.services import TimelineService
from travel_timeline.timeline import EntryDateResolver, JourneyPartitioner

TODAY = date(2024, 1, 1)


def make_entry(
    entry_id: str,
    entry_date: str,
    is_home: bool = False,
    exit_date: Optional[str] = None,
    country: str = "Testland",
) -> TravelEntry:
    return TravelEntry(
        id=entry_id,
        country=country,
        city=f"City {entry_id}",
        entry_date=entry_date,
        exit_date=exit_date,
        is_home=is_home,
    )


@pytest.fixture
def entry() -> Callable[..., TravelEntry]:
    return make_entry


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def resolver(clock: FixedClock) -> EntryDateResolver:
    return EntryDateResolver(clock=clock)


@pytest.fixture
def partitioner(resolver: EntryDateResolver) -> JourneyPartitioner:
    return JourneyPartitioner(resolver=resolver)


@pytest.fixture
def sample_entries() -> list[TravelEntry]:
    return list(SAMPLE_TRAVELS)


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def service(memory_storage: InMemoryStorage, partitioner: JourneyPartitioner) -> TimelineService:
    svc = TimelineService(
        storage=memory_storage,
        partitioner=partitioner,
        default_home=HomeLocation(country="Singapore", city="Singapore", flag_code="sg"),
    )
    svc.load()
    return svc

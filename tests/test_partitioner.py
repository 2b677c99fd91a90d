"""Tests for grouping entries into journeys."""

import random
from datetime import date, timedelta

import pytest

from travel_timeline.adapters.clock import FixedClock
from travel_timeline.domain.errors import ParseError
from travel_timeline.domain.models import TravelEntry
from travel_timeline.timeline import group_into_journeys, sort_entries


def _random_entries(seed: int, size: int) -> list[TravelEntry]:
    rng = random.Random(seed)
    start = date(2020, 1, 1)
    return [
        TravelEntry(
            id=f"e{i}",
            country=rng.choice(["France", "Japan", "Peru", "Kenya"]),
            city="Somewhere",
            # Narrow range so that tied dates show up
            entry_date=(start + timedelta(days=rng.randint(0, size))).isoformat(),
            is_home=rng.random() < 0.3,
        )
        for i in range(size)
    ]


def test_scenario_single_journey_closed_by_home(partitioner, entry):
    entries = [
        entry("1", "2023-01-15", country="United States"),
        entry("2", "2023-02-02", country="Japan"),
        entry("3", "2023-02-16", is_home=True, country="Singapore"),
    ]

    journeys = partitioner.group_into_journeys(entries)

    assert len(journeys) == 1
    journey = journeys[0]
    assert journey.id == "journey-1"
    assert [t.id for t in journey.trips] == ["1", "2", "3"]
    assert journey.start_date == "2023-01-15"
    assert journey.end_date == "2024-01-01"
    assert not journey.is_open


def test_scenario_sample_data_splits_at_first_home(partitioner, sample_entries):
    journeys = partitioner.group_into_journeys(sample_entries)

    assert [j.id for j in journeys] == ["journey-1", "journey-2"]
    assert [t.id for t in journeys[0].trips] == ["1", "2", "3"]
    assert [t.id for t in journeys[1].trips] == ["4", "5"]
    # End date is resolved against the full set, not the run
    assert journeys[0].end_date == "2023-05-01"
    assert journeys[1].end_date == "2024-01-01"


def test_scenario_empty_input(partitioner):
    assert partitioner.group_into_journeys([]) == []


def test_scenario_single_open_entry(entry):
    only = entry("1", "2023-06-01")

    journeys = group_into_journeys([only], clock=FixedClock(date(2024, 1, 1)))

    assert len(journeys) == 1
    assert journeys[0].trips == (only,)
    assert journeys[0].end_date == "2024-01-01"
    assert journeys[0].is_open


def test_home_entry_with_nothing_before_is_its_own_journey(partitioner, entry):
    entries = [
        entry("home", "2023-01-01", is_home=True),
        entry("1", "2023-02-01"),
        entry("2", "2023-03-01", is_home=True),
    ]

    journeys = partitioner.group_into_journeys(entries)

    assert [[t.id for t in j.trips] for j in journeys] == [["home"], ["1", "2"]]
    assert journeys[0].end_date == "2023-02-01"


def test_all_home_entries_give_one_journey_each(partitioner, entry):
    entries = [entry(str(i), f"2023-0{i}-01", is_home=True) for i in range(1, 5)]

    journeys = partitioner.group_into_journeys(entries)

    assert len(journeys) == 4
    assert all(len(j.trips) == 1 for j in journeys)
    assert [j.id for j in journeys] == ["journey-1", "journey-2", "journey-3", "journey-4"]


def test_open_tail_after_last_home(partitioner, entry):
    entries = [
        entry("1", "2023-01-01"),
        entry("2", "2023-02-01", is_home=True),
        entry("3", "2023-03-01"),
        entry("4", "2023-04-01", exit_date="2023-04-10"),
    ]

    journeys = partitioner.group_into_journeys(entries)

    assert [t.id for t in journeys[-1].trips] == ["3", "4"]
    assert journeys[-1].is_open
    assert journeys[-1].end_date == "2023-04-10"


def test_no_home_entry_gives_one_open_journey(partitioner, entry):
    entries = [entry("2", "2023-02-01"), entry("1", "2023-01-01")]

    journeys = partitioner.group_into_journeys(entries)

    assert len(journeys) == 1
    assert [t.id for t in journeys[0].trips] == ["1", "2"]
    assert journeys[0].is_open


def test_tied_dates_keep_input_order_inside_journeys(partitioner, entry):
    entries = [
        entry("b", "2023-03-01"),
        entry("a", "2023-03-01", is_home=True),
        entry("c", "2023-03-01"),
    ]

    journeys = partitioner.group_into_journeys(entries)

    assert [[t.id for t in j.trips] for j in journeys] == [["b", "a"], ["c"]]


def test_input_is_not_mutated(partitioner, sample_entries):
    shuffled = list(reversed(sample_entries))
    snapshot = list(shuffled)

    partitioner.group_into_journeys(shuffled)

    assert shuffled == snapshot


def test_ids_are_regenerated_on_every_call(partitioner, sample_entries):
    first = partitioner.group_into_journeys(sample_entries)
    # Dropping the first journey renumbers the remaining one
    second = partitioner.group_into_journeys(sample_entries[3:])

    assert first[1].id == "journey-2"
    assert second[0].id == "journey-1"
    assert second[0].trips == first[1].trips


def test_malformed_date_raises_parse_error(partitioner, entry):
    entries = [entry("1", "2023-01-15"), entry("broken", "January 2023")]

    with pytest.raises(ParseError) as exc_info:
        partitioner.group_into_journeys(entries)

    assert exc_info.value.entry_id == "broken"


def test_malformed_exit_date_inside_journey_raises_parse_error(partitioner, entry):
    entries = [
        entry("1", "2023-01-15", exit_date="soon"),
        entry("2", "2023-02-02"),
        entry("3", "2023-02-16", is_home=True),
    ]

    with pytest.raises(ParseError) as exc_info:
        partitioner.group_into_journeys(entries)

    assert exc_info.value.entry_id == "1"
    assert exc_info.value.value == "soon"


@pytest.mark.parametrize("seed", range(10))
def test_partition_properties(partitioner, seed):
    entries = _random_entries(seed, size=12)

    journeys = partitioner.group_into_journeys(entries)

    # Totality: concatenated trips reproduce the sorted input
    flattened = [trip for journey in journeys for trip in journey.trips]
    assert flattened == sort_entries(entries)

    for journey in journeys:
        # Home entries only ever close a journey
        assert all(not trip.is_home for trip in journey.trips[:-1])
        assert journey.start_date == journey.trips[0].entry_date

    # Only the last journey may be open
    assert all(not journey.is_open for journey in journeys[:-1])

"""Tests for effective exit date resolution."""

import logging
from datetime import date

import pytest

from travel_timeline.adapters.clock import FixedClock
from travel_timeline.domain.errors import InvariantViolation, ParseError
from travel_timeline.timeline import EntryDateResolver, effective_exit_date, sort_entries


def test_recorded_exit_date_wins_over_neighbours(resolver, entry):
    first = entry("1", "2023-01-15", exit_date="2023-01-20")
    second = entry("2", "2023-02-02")

    assert resolver.effective_exit_date(first, [first, second]) == "2023-01-20"


def test_recorded_exit_date_returned_even_if_entry_not_in_set(resolver, entry):
    lonely = entry("1", "2023-01-15", exit_date="2023-01-20")

    assert resolver.effective_exit_date(lonely, []) == "2023-01-20"


def test_missing_exit_date_is_next_entry_date(resolver, entry):
    first = entry("1", "2023-01-15")
    second = entry("2", "2023-02-02")
    third = entry("3", "2023-02-16", is_home=True)

    # Unsorted input on purpose
    entries = [third, first, second]

    assert resolver.effective_exit_date(first, entries) == "2023-02-02"
    assert resolver.effective_exit_date(second, entries) == "2023-02-16"


def test_empty_string_exit_date_counts_as_missing(resolver, entry):
    first = entry("1", "2023-01-15", exit_date="")
    second = entry("2", "2023-02-02")

    assert resolver.effective_exit_date(first, [first, second]) == "2023-02-02"


def test_last_entry_without_exit_date_ends_today(resolver, entry):
    only = entry("1", "2023-06-01")

    assert resolver.effective_exit_date(only, [only]) == "2024-01-01"


def test_today_comes_from_the_injected_clock(entry):
    only = entry("1", "2023-06-01")
    resolver = EntryDateResolver(clock=FixedClock(date(2030, 5, 17)))

    assert resolver.effective_exit_date(only, [only]) == "2030-05-17"


def test_unknown_entry_raises_invariant_violation(resolver, entry):
    stranger = entry("99", "2023-01-01")
    others = [entry("1", "2023-01-15")]

    with pytest.raises(InvariantViolation) as exc_info:
        resolver.effective_exit_date(stranger, others)

    assert exc_info.value.entry_id == "99"


def test_malformed_entry_date_raises_parse_error_naming_entry(resolver, entry):
    good = entry("1", "2023-01-15")
    bad = entry("2", "15/01/2023")

    with pytest.raises(ParseError) as exc_info:
        resolver.effective_exit_date(good, [good, bad])

    assert exc_info.value.entry_id == "2"
    assert exc_info.value.value == "15/01/2023"


def test_malformed_exit_date_raises_parse_error(resolver, entry):
    bad = entry("1", "2023-01-15", exit_date="2023-02-31")

    with pytest.raises(ParseError) as exc_info:
        resolver.effective_exit_date(bad, [bad])

    assert exc_info.value.entry_id == "1"


def test_inverted_range_is_returned_and_logged(resolver, entry, caplog):
    inverted = entry("1", "2023-03-10", exit_date="2023-03-01")

    with caplog.at_level(logging.WARNING, logger="travel_timeline.timeline.resolver"):
        result = resolver.effective_exit_date(inverted, [inverted])

    assert result == "2023-03-01"
    assert "Entry exits before it starts" in caplog.text


def test_tied_entry_dates_keep_input_order(resolver, entry):
    later_in_input = entry("a", "2023-03-01")
    earlier_in_input = entry("b", "2023-03-01")
    entries = [earlier_in_input, later_in_input]

    assert [e.id for e in sort_entries(entries)] == ["b", "a"]
    assert resolver.effective_exit_date(earlier_in_input, entries) == "2023-03-01"
    assert resolver.effective_exit_date(later_in_input, entries) == "2024-01-01"


def test_caller_sequence_is_not_reordered(resolver, entry):
    entries = [entry("2", "2023-02-02"), entry("1", "2023-01-15")]

    resolver.effective_exit_date(entries[1], entries)

    assert [e.id for e in entries] == ["2", "1"]


def test_module_level_function_accepts_a_clock(entry):
    only = entry("1", "2023-06-01")

    assert effective_exit_date(only, [only], clock=FixedClock(date(2024, 1, 1))) == "2024-01-01"

"""Effective exit date resolution for travel entries.

An entry without a recorded exit date is assumed to end when the next
recorded entry begins. The most recent entry without an exit date is
still ongoing and ends "today", read from the injected clock.

Entries are ordered with ``sorted()``, which is stable: entries sharing
an entry date keep their relative input order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..adapters.clock import SystemClock
from ..domain.errors import InvariantViolation
from ..domain.models import TravelEntry
from ..ports.clock import ClockPort
from .dates import parse_entry_date


def sort_entries(entries: Sequence[TravelEntry]) -> list[TravelEntry]:
    """Return a chronologically sorted copy of ``entries``.

    Ties on entry date keep input order. Recorded exit dates are parsed
    too, so a malformed one surfaces even when it is never resolved.

    Raises:
        ParseError: If an entry or exit date is malformed.
    """
    keyed = []
    for e in entries:
        if e.exit_date:
            parse_entry_date(e.exit_date, e.id)
        keyed.append((parse_entry_date(e.entry_date, e.id), e))
    return [entry for _, entry in sorted(keyed, key=lambda pair: pair[0])]


@dataclass
class EntryDateResolver:
    """Resolves the effective exit date of an entry.

    Attributes:
        clock: Source of "today" for the ongoing most recent entry
    """

    clock: ClockPort = field(default_factory=SystemClock)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def effective_exit_date(
        self, entry: TravelEntry, all_entries: Sequence[TravelEntry]
    ) -> str:
        """Return the recorded or inferred exit date of ``entry``.

        Args:
            entry: The entry to resolve.
            all_entries: The full entry set ``entry`` belongs to.

        Returns:
            ISO date string.

        Raises:
            ParseError: If a date involved in the resolution is malformed.
            InvariantViolation: If ``entry`` is not part of ``all_entries``.
        """
        if entry.exit_date:
            return self._recorded_exit_date(entry, entry.exit_date)
        return self.effective_exit_date_sorted(entry, sort_entries(all_entries))

    def effective_exit_date_sorted(
        self, entry: TravelEntry, ordered: Sequence[TravelEntry]
    ) -> str:
        """Same as effective_exit_date, for an already sorted entry set."""
        if entry.exit_date:
            return self._recorded_exit_date(entry, entry.exit_date)

        index = _index_of(entry.id, ordered)
        if index is None:
            raise InvariantViolation(
                f"Entry {entry.id} is not part of the entry set",
                entry_id=entry.id,
            )

        if index < len(ordered) - 1:
            return ordered[index + 1].entry_date

        return self.clock.today().isoformat()

    def _recorded_exit_date(self, entry: TravelEntry, exit_date: str) -> str:
        exit_day = parse_entry_date(exit_date, entry.id)
        entry_day = parse_entry_date(entry.entry_date, entry.id)
        if exit_day < entry_day:
            self._logger.warning(
                "Entry exits before it starts",
                extra={
                    "entry_id": entry.id,
                    "entry_date": entry.entry_date,
                    "exit_date": exit_date,
                },
            )
        return exit_date


def _index_of(entry_id: str, ordered: Sequence[TravelEntry]) -> Optional[int]:
    for index, candidate in enumerate(ordered):
        if candidate.id == entry_id:
            return index
    return None


def effective_exit_date(
    entry: TravelEntry,
    all_entries: Sequence[TravelEntry],
    clock: Optional[ClockPort] = None,
) -> str:
    """Resolve the effective exit date of ``entry`` against ``all_entries``.

    Convenience wrapper around EntryDateResolver. Without a clock the
    system date is used for the ongoing most recent entry.
    """
    resolver = EntryDateResolver(clock=clock) if clock else EntryDateResolver()
    return resolver.effective_exit_date(entry, all_entries)

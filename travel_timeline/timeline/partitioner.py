"""Grouping of travel entries into journeys.

A journey is a maximal run of chronologically sorted entries that ends
with (and includes) a return-home entry. Entries after the last home
entry form a final, open journey.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..domain.models import Journey, TravelEntry
from ..ports.clock import ClockPort
from .resolver import EntryDateResolver, sort_entries


@dataclass
class JourneyPartitioner:
    """Partitions a flat entry list into ordered journeys.

    Journey ids are positional and regenerated on every call; they do
    not identify a journey across calls.

    Attributes:
        resolver: Resolves the end date of each journey
    """

    resolver: EntryDateResolver = field(default_factory=EntryDateResolver)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def group_into_journeys(self, entries: Sequence[TravelEntry]) -> List[Journey]:
        """Group entries into journeys closed by home entries.

        Args:
            entries: The entries to group. The sequence is not modified.

        Returns:
            Journeys in chronological order.

        Raises:
            ParseError: If an entry date is malformed.
        """
        ordered = sort_entries(entries)
        journeys: List[Journey] = []
        run: List[TravelEntry] = []

        for entry in ordered:
            run.append(entry)
            if entry.is_home:
                journeys.append(self._close(run, ordered, len(journeys) + 1))
                run = []

        if run:
            journeys.append(self._close(run, ordered, len(journeys) + 1))

        self._logger.debug(
            "Entries grouped",
            extra={"entries": len(ordered), "journeys": len(journeys)},
        )
        return journeys

    def _close(
        self,
        run: Sequence[TravelEntry],
        ordered: Sequence[TravelEntry],
        position: int,
    ) -> Journey:
        return Journey(
            id=f"journey-{position}",
            trips=tuple(run),
            start_date=run[0].entry_date,
            end_date=self.resolver.effective_exit_date_sorted(run[-1], ordered),
        )


def group_into_journeys(
    entries: Sequence[TravelEntry],
    clock: Optional[ClockPort] = None,
) -> List[Journey]:
    """Group ``entries`` into journeys.

    Convenience wrapper around JourneyPartitioner. Without a clock the
    system date ends an open final journey.
    """
    resolver = EntryDateResolver(clock=clock) if clock else EntryDateResolver()
    return JourneyPartitioner(resolver=resolver).group_into_journeys(entries)

"""Plain-text timeline renderer.

Lays the derived timeline out the way the timeline screen does: one
block per journey with its title and total, then one line per entry
with its dates. Away entries show their duration, home entries are
marked as such.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List

from ...domain.models import EntryTimeline, JourneyTimeline, TimelineView


def format_date(value: str) -> str:
    """Format an ISO date as ``Jan 15, 2023``."""
    day = date.fromisoformat(value)
    return f"{day:%b} {day.day}, {day.year}"


@dataclass
class TextTimelineRenderer:
    """Renders a TimelineView as indented plain text.

    Attributes:
        show_ids: Append entry ids so they can be passed to edit/delete
    """

    show_ids: bool = True

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def render(self, view: TimelineView) -> str:
        if view.is_empty:
            return "No travels recorded yet."

        lines: List[str] = []
        for journey in view.journeys:
            if lines:
                lines.append("")
            lines.extend(self._render_journey(journey))

        self._logger.debug("Timeline rendered", extra={"journeys": len(view.journeys)})
        return "\n".join(lines)

    def _render_journey(self, journey: JourneyTimeline) -> List[str]:
        lines = [f"{journey.title} ({journey.total_days} days total)"]
        lines.extend(self._render_entry(row) for row in journey.entries)
        return lines

    def _render_entry(self, row: EntryTimeline) -> str:
        entry = row.entry
        place = f"{entry.city}, {entry.country}"
        if entry.is_home:
            line = f"  {format_date(entry.entry_date)}  {place}  [Home]"
        else:
            line = (
                f"  {format_date(entry.entry_date)}  {place}  "
                f"{row.duration_days} days (exit {format_date(row.effective_exit_date)})"
            )
        if self.show_ids:
            line += f"  #{entry.id}"
        return line

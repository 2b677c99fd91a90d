"""Fixed clock implementation for testing.

Pins "today" to a known day so that inferred exit dates of the most
recent entry are reproducible.

Example:
    resolver = EntryDateResolver(clock=FixedClock(date(2024, 1, 1)))
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class FixedClock:
    """Clock that always reports the same day.

    Attributes:
        day: The date returned by every call to today()
    """

    day: date

    def today(self) -> date:
        return self.day

    @classmethod
    def from_iso(cls, value: str) -> FixedClock:
        """Build a clock from a ``YYYY-MM-DD`` string."""
        return cls(date.fromisoformat(value))

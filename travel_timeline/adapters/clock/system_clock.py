"""Wall-clock implementation of the ClockPort."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass
class SystemClock:
    """Clock backed by the local system date."""

    def today(self) -> date:
        return date.today()

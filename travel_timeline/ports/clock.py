"""Clock port - Injectable source of the current date.

The timeline core needs "today" for exactly one purpose: the exit date
of the most recent entry when none was recorded. Reading the wall clock
through this port keeps the core deterministic under test.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol


class ClockPort(Protocol):
    """Port for reading the current calendar date.

    Implementations:
    - adapters/clock/system_clock.py (SystemClock) - Production
    - adapters/clock/fixed_clock.py (FixedClock) - Testing
    """

    def today(self) -> date:
        """Return the current calendar date.

        Returns:
            Today's date in the clock's frame of reference.
        """
        ...

"""Clock adapters - Implementations of the ClockPort.

Available implementations:
- SystemClock: Reads the local wall clock
- FixedClock: Always returns the same day (testing, reproducible output)
"""

from .fixed_clock import FixedClock
from .system_clock import SystemClock

__all__ = ["SystemClock", "FixedClock"]

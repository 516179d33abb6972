"""A monotonic interval timer with a chosen precision."""

from __future__ import annotations

import enum
import time


class TimePrecision(enum.IntEnum):
    NANOSECONDS = 0
    MICROSECONDS = 1
    MILLISECONDS = 2
    SECONDS = 3


_NANOSECONDS_PER_UNIT = {
    TimePrecision.NANOSECONDS: 1,
    TimePrecision.MICROSECONDS: 1_000,
    TimePrecision.MILLISECONDS: 1_000_000,
    TimePrecision.SECONDS: 1_000_000_000,
}


class Timer:
    """Measures whole units of elapsed time since a stored time point.

    Until ``set_now`` is called the interval is measured from the
    monotonic clock's reference point.
    """

    def __init__(self, precision: TimePrecision = TimePrecision.MILLISECONDS) -> None:
        self.precision = TimePrecision(precision)
        self._time_point = 0

    def set_now(self) -> None:
        """Store the current time point."""
        self._time_point = time.monotonic_ns()

    def get_interval(self) -> int:
        """Return the whole units elapsed since the stored time point."""
        elapsed = time.monotonic_ns() - self._time_point
        unit = _NANOSECONDS_PER_UNIT[self.precision]
        return int(elapsed / unit) if elapsed < 0 else elapsed // unit

    def get_interval_and_set_now(self) -> int:
        """Return the interval, then store the current time point."""
        interval = self.get_interval()
        self.set_now()
        return interval
"""
Clock sources used to time benchmark loops.
"""

import time
from typing import Protocol


class Clock(Protocol):
    """Monotonic clock reporting integer nanoseconds."""

    def now_ns(self) -> int:
        ...


class MonotonicClock:
    """High-resolution monotonic clock backed by time.perf_counter_ns."""

    def now_ns(self) -> int:
        return time.perf_counter_ns()

    @property
    def resolution_ns(self) -> float:
        """Resolution of the underlying timer in nanoseconds."""
        return time.get_clock_info("perf_counter").resolution * 1e9


class ManualClock:
    """Clock that only moves when told to.

    Useful for deterministic tests and dry runs: an operation under test can
    call ``advance`` to simulate its own cost.
    """

    def __init__(self, start_ns: int = 0):
        self._now = start_ns
        self.reads = 0

    def now_ns(self) -> int:
        self.reads += 1
        return self._now

    def advance(self, ns: int) -> None:
        """Move the clock forward by ``ns`` nanoseconds."""
        if ns < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += ns

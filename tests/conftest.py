"""
Shared fixtures for the micro benchmark tests.
"""

import pytest

from micro_benchmark.core.benchmark_runner import BenchmarkRunner
from micro_benchmark.core.clock import ManualClock


class CountingOperation:
    """Operation that counts calls and advances a manual clock by a fixed cost."""

    def __init__(self, clock=None, cost_ns=0, fail_on_call=None, error=None):
        self.clock = clock
        self.cost_ns = cost_ns
        self.fail_on_call = fail_on_call
        self.error = error
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if self.fail_on_call is not None and self.calls == self.fail_on_call:
            raise self.error
        if self.clock is not None:
            self.clock.advance(self.cost_ns)


@pytest.fixture
def manual_clock():
    return ManualClock()


@pytest.fixture
def reclaim_calls():
    """List that records every heap reclamation request."""
    return []


@pytest.fixture
def runner(manual_clock, reclaim_calls):
    return BenchmarkRunner(clock=manual_clock, reclaim=lambda: reclaim_calls.append(1))


@pytest.fixture
def counting_operation():
    return CountingOperation

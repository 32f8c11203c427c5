"""
Benchmark runner: times a single operation under controlled conditions.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .clock import Clock, MonotonicClock
from .errors import InvalidSpec, ResourceExhausted, is_resource_exhaustion
from .metrics import BenchmarkResult, reclaim_heap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkSpec:
    """What to run and how many times."""

    name: str
    iterations: int
    operation: Callable[[], Any]


class BenchmarkRunner:
    """Run a benchmark spec and report the average time per iteration.

    The runner keeps no state between runs; the same instance can be reused
    and called reentrantly.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        reclaim: Optional[Callable[[], None]] = reclaim_heap,
    ):
        """Initialize benchmark runner.

        Args:
            clock: Monotonic nanosecond clock, defaults to perf_counter_ns
            reclaim: Heap reclamation hook called before warmup, or None to skip
        """
        self.clock = clock if clock is not None else MonotonicClock()
        self.reclaim = reclaim

    @staticmethod
    def validate(spec: BenchmarkSpec) -> None:
        """Raise InvalidSpec if the spec cannot be run."""
        if spec is None:
            raise InvalidSpec("benchmark spec is missing")
        if not isinstance(spec.name, str) or not spec.name:
            raise InvalidSpec("benchmark name must be a non-empty string")
        if isinstance(spec.iterations, bool) or not isinstance(spec.iterations, int):
            raise InvalidSpec(
                f"{spec.name}: iterations must be an integer, got {spec.iterations!r}"
            )
        if spec.iterations <= 0:
            raise InvalidSpec(
                f"{spec.name}: iterations must be positive, got {spec.iterations}"
            )
        if spec.operation is None or not callable(spec.operation):
            raise InvalidSpec(f"{spec.name}: operation must be callable")

    def run(self, spec: BenchmarkSpec) -> BenchmarkResult:
        """Run a benchmark.

        Reclaims the heap, calls the operation once to absorb one-time setup
        costs, then times ``spec.iterations`` back-to-back calls.

        Args:
            spec: Benchmark to run

        Returns:
            BenchmarkResult with the average duration per iteration

        Raises:
            InvalidSpec: if the spec fails validation; nothing has run yet
            ResourceExhausted: if the operation ran out of memory or another
                system resource; the loop is abandoned
        """
        self.validate(spec)
        logger.debug("%s: %d iterations", spec.name, spec.iterations)

        if self.reclaim is not None:
            self.reclaim()

        operation = spec.operation
        iterations = spec.iterations

        try:
            operation()
        except Exception as e:
            if is_resource_exhaustion(e):
                logger.warning("%s: resource exhausted during warmup: %s", spec.name, e)
                raise ResourceExhausted(
                    spec.name,
                    "warmup",
                    0,
                    iterations,
                    reason=str(e) or type(e).__name__,
                ) from e
            raise

        iteration = 0
        start = self.clock.now_ns()
        try:
            for iteration in range(iterations):
                operation()
        except Exception as e:
            if is_resource_exhaustion(e):
                logger.warning(
                    "%s: resource exhausted at iteration %d of %d: %s",
                    spec.name,
                    iteration,
                    iterations,
                    e,
                )
                raise ResourceExhausted(
                    spec.name,
                    "measure",
                    iteration,
                    iterations,
                    reason=str(e) or type(e).__name__,
                ) from e
            raise
        end = self.clock.now_ns()

        elapsed = end - start
        result = BenchmarkResult(
            name=spec.name,
            total_iterations=iterations,
            average_duration_ns=elapsed / iterations,
            total_duration_ns=elapsed,
        )
        logger.debug(
            "%s: %d ns total, %.1f ns/iter",
            spec.name,
            elapsed,
            result.average_duration_ns,
        )
        return result


def run_benchmark(
    name: str,
    operation: Callable[[], Any],
    iterations: int,
    clock: Optional[Clock] = None,
) -> BenchmarkResult:
    """Convenience wrapper: build a spec and run it with a fresh runner."""
    return BenchmarkRunner(clock=clock).run(BenchmarkSpec(name, iterations, operation))

"""
Benchmark results, heap reclamation and result collection.
"""

import gc
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np
import torch

from .errors import InvalidSpec

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Container for benchmark results."""

    name: str
    total_iterations: int
    average_duration_ns: float
    total_duration_ns: int = 0
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def average_duration_us(self) -> float:
        return self.average_duration_ns / 1e3

    @property
    def average_duration_ms(self) -> float:
        return self.average_duration_ns / 1e6

    @property
    def throughput(self) -> Optional[float]:
        """Iterations per second, or None when the average is zero."""
        if self.average_duration_ns <= 0:
            return None
        return 1e9 / self.average_duration_ns


def reclaim_heap() -> None:
    """Bring the heap to a steady state before timing.

    Runs a full garbage collection, which also runs pending finalizers, and
    releases cached CUDA memory when a GPU is present.
    """
    if torch.cuda.is_available():
        torch.cuda.synchronize()
        torch.cuda.empty_cache()
    gc.collect()


class MetricsCollector:
    """Collect and analyze benchmark results."""

    def __init__(self, runner=None):
        """Initialize metrics collector.

        Args:
            runner: BenchmarkRunner used to execute specs. A default runner
                with the monotonic clock is created when omitted.
        """
        if runner is None:
            from .benchmark_runner import BenchmarkRunner

            runner = BenchmarkRunner()
        self.runner = runner
        self._results: List[BenchmarkResult] = []

    def benchmark_function(
        self,
        spec,
        rounds: int = 1,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> BenchmarkResult:
        """Run a spec several times and aggregate the rounds into one result.

        Each round is a full run (heap reclamation, warmup, timed loop). The
        reported average is the mean of the per-round averages.

        Args:
            spec: BenchmarkSpec to run
            rounds: Number of independent runs
            metadata: Extra metadata stored on the aggregated result

        Returns:
            Aggregated BenchmarkResult
        """
        if isinstance(rounds, bool) or not isinstance(rounds, int) or rounds < 1:
            raise InvalidSpec(f"rounds must be a positive integer, got {rounds!r}")

        round_results = [self.runner.run(spec) for _ in range(rounds)]
        times = np.array([r.average_duration_ns for r in round_results], dtype=float)

        result = BenchmarkResult(
            name=spec.name,
            total_iterations=sum(r.total_iterations for r in round_results),
            average_duration_ns=float(np.mean(times)),
            total_duration_ns=sum(r.total_duration_ns for r in round_results),
            metadata={
                "rounds": rounds,
                "iterations_per_round": spec.iterations,
                "round_times": times.tolist(),
                "std_dev": float(np.std(times)),
                "min_time": float(np.min(times)),
                "max_time": float(np.max(times)),
                "median_time": float(np.median(times)),
            },
        )
        if metadata:
            result.metadata.update(metadata)

        logger.debug(
            "%s: %d round(s), mean %.1f ns/iter",
            spec.name,
            rounds,
            result.average_duration_ns,
        )
        self._results.append(result)
        return result

    def add_result(self, result: BenchmarkResult) -> None:
        """Record a result produced elsewhere."""
        self._results.append(result)

    def get_results(self) -> List[BenchmarkResult]:
        """Get all collected benchmark results."""
        return self._results.copy()

    def clear_results(self) -> None:
        """Clear all collected results."""
        self._results.clear()

    def compare_results(self, baseline: str = "python") -> Dict[str, Dict[str, Any]]:
        """Compare variants of the same benchmark against a baseline variant.

        Results are grouped by their ``group`` metadata (the result name when
        absent) and told apart by their ``variant`` metadata. When a group and
        variant pair was measured more than once, the most recent result is
        the one compared.

        Args:
            baseline: Variant to use as baseline for speedup calculation

        Returns:
            Dictionary mapping group -> variant -> comparison metrics
        """
        grouped: Dict[str, Dict[str, BenchmarkResult]] = {}
        for result in self._results:
            group = result.metadata.get("group", result.name)
            variant = result.metadata.get("variant", "default")
            # later results replace earlier ones for the same group and variant
            grouped.setdefault(group, {})[variant] = result

        comparisons = {}
        for group, variants in grouped.items():
            if baseline not in variants:
                continue

            reference = variants[baseline]
            comparisons[group] = {}

            for variant, result in variants.items():
                if variant == baseline:
                    speedup = 1.0
                elif result.average_duration_ns > 0:
                    speedup = reference.average_duration_ns / result.average_duration_ns
                else:
                    speedup = None

                comparisons[group][variant] = {
                    "average_duration_ns": result.average_duration_ns,
                    "speedup": speedup,
                    "throughput": result.throughput,
                }

        return comparisons

"""
Registry of named benchmarks, grouped by category.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

from . import config
from .benchmark_runner import BenchmarkRunner, BenchmarkSpec
from .errors import ResourceExhausted, is_resource_exhaustion
from .metrics import BenchmarkResult, MetricsCollector

logger = logging.getLogger(__name__)

# factory(size) -> zero-argument operation
OperationFactory = Callable[[int], Callable[[], Any]]


class BenchmarkSuite:
    """Register benchmarks and run them across problem sizes."""

    def __init__(
        self,
        runner: Optional[BenchmarkRunner] = None,
        load_builtins: bool = True,
    ):
        """Initialize benchmark suite.

        Args:
            runner: Runner used for every benchmark, a default one if omitted
            load_builtins: Register the bundled python and tensor workloads
        """
        self.runner = runner if runner is not None else BenchmarkRunner()
        self.metrics_collector = MetricsCollector(self.runner)
        self._registered_benchmarks: Dict[str, Dict[str, Dict[str, Any]]] = {}

        if load_builtins:
            self._load_benchmarks()

    def _load_benchmarks(self) -> None:
        """Load and register bundled benchmark workloads."""
        from ..benchmarks.python_ops import register_python_benchmarks
        from ..benchmarks.tensor_ops import register_tensor_benchmarks

        register_python_benchmarks(self)
        register_tensor_benchmarks(self)

    def register_benchmark(
        self,
        category: str,
        name: str,
        factory: OperationFactory,
        variant: str = "python",
        group: Optional[str] = None,
    ) -> None:
        """Register a benchmark.

        Args:
            category: Benchmark category (python, tensor, ...)
            name: Benchmark name, unique within the category
            factory: Builds the operation to time for a given problem size
            variant: Implementation label used when comparing results
            group: Results sharing a group are compared against each other,
                defaults to the benchmark name
        """
        if not callable(factory):
            raise ValueError(f"factory for {category}/{name} must be callable")

        self._registered_benchmarks.setdefault(category, {})[name] = {
            "factory": factory,
            "variant": variant,
            "group": group or name,
        }

    def list_benchmarks(self, category: Optional[str] = None) -> Dict[str, List[str]]:
        """List available benchmarks.

        Args:
            category: Specific category to list, or None for all

        Returns:
            Dictionary mapping categories to benchmark names
        """
        if category:
            if category in self._registered_benchmarks:
                return {category: list(self._registered_benchmarks[category].keys())}
            return {}

        return {
            cat: list(benchmarks.keys())
            for cat, benchmarks in self._registered_benchmarks.items()
            if benchmarks
        }

    def run_benchmark(
        self,
        category: str,
        name: str,
        sizes: Optional[List[int]] = None,
        iterations: Optional[int] = None,
        rounds: Optional[int] = None,
    ) -> List[BenchmarkResult]:
        """Run a specific benchmark across problem sizes.

        A size whose inputs or operation exhaust memory is logged and skipped; the
        remaining sizes still run.

        Args:
            category: Benchmark category
            name: Benchmark name
            sizes: Problem sizes to test
            iterations: Timed iterations per round
            rounds: Rounds aggregated into each result

        Returns:
            List of BenchmarkResult objects, one per completed size
        """
        if category not in self._registered_benchmarks:
            raise ValueError(f"Unknown benchmark category: {category}")

        if name not in self._registered_benchmarks[category]:
            raise ValueError(f"Unknown benchmark: {name} in category {category}")

        if sizes is None:
            sizes = config.DEFAULT_SIZES
        if iterations is None:
            iterations = config.DEFAULT_ITERATIONS
        if rounds is None:
            rounds = config.DEFAULT_ROUNDS

        benchmark_def = self._registered_benchmarks[category][name]
        results = []

        for size in sizes:
            try:
                operation = benchmark_def["factory"](size)
            except Exception as e:
                if not is_resource_exhaustion(e):
                    raise
                logger.warning(
                    "Skipping %s/%s at size %d: cannot build inputs: %s",
                    category,
                    name,
                    size,
                    e,
                )
                continue

            spec = BenchmarkSpec(
                name=f"{name}_size_{size}", iterations=iterations, operation=operation
            )
            try:
                result = self.metrics_collector.benchmark_function(
                    spec,
                    rounds=rounds,
                    metadata={
                        "category": category,
                        "size": size,
                        "group": f"{benchmark_def['group']}_size_{size}",
                        "variant": benchmark_def["variant"],
                    },
                )
            except ResourceExhausted as e:
                logger.warning(
                    "Skipping %s/%s at size %d: %s", category, name, size, e
                )
                continue
            results.append(result)

        return results

    def run_category(self, category: str, **kwargs) -> List[BenchmarkResult]:
        """Run all benchmarks in a category.

        Args:
            category: Benchmark category to run
            **kwargs: Passed through to run_benchmark

        Returns:
            List of all BenchmarkResult objects
        """
        if category not in self._registered_benchmarks:
            raise ValueError(f"Unknown benchmark category: {category}")

        results = []
        for benchmark_name in self._registered_benchmarks[category]:
            results.extend(self.run_benchmark(category, benchmark_name, **kwargs))
        return results

    def run_all(self, **kwargs) -> List[BenchmarkResult]:
        """Run all available benchmarks."""
        results = []
        for category, benchmarks in self._registered_benchmarks.items():
            if benchmarks:
                results.extend(self.run_category(category, **kwargs))
        return results

    def get_results(self) -> List[BenchmarkResult]:
        """Get all collected results."""
        return self.metrics_collector.get_results()

    def clear_results(self) -> None:
        """Clear all collected results."""
        self.metrics_collector.clear_results()

    def compare_results(self, baseline: str = "python") -> Dict[str, Dict[str, Any]]:
        """Compare results across variants."""
        return self.metrics_collector.compare_results(baseline)

"""
Micro Benchmark

Time a zero-argument operation over many iterations, with heap reclamation
and a warmup call before the clock starts.
"""

__version__ = "0.1.0"

from .core.benchmark_runner import BenchmarkRunner, BenchmarkSpec, run_benchmark
from .core.errors import BenchmarkError, InvalidSpec, ResourceExhausted
from .core.metrics import BenchmarkResult, MetricsCollector
from .core.suite import BenchmarkSuite

__all__ = [
    "BenchmarkRunner",
    "BenchmarkSpec",
    "run_benchmark",
    "BenchmarkError",
    "InvalidSpec",
    "ResourceExhausted",
    "BenchmarkResult",
    "MetricsCollector",
    "BenchmarkSuite",
]

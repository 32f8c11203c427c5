"""
Core benchmark infrastructure.
"""

from .benchmark_runner import BenchmarkRunner, BenchmarkSpec, run_benchmark
from .clock import Clock, ManualClock, MonotonicClock
from .environment import EnvironmentInfo
from .errors import BenchmarkError, InvalidSpec, ResourceExhausted
from .metrics import BenchmarkResult, MetricsCollector, reclaim_heap
from .suite import BenchmarkSuite

__all__ = [
    "BenchmarkRunner",
    "BenchmarkSpec",
    "run_benchmark",
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "EnvironmentInfo",
    "BenchmarkError",
    "InvalidSpec",
    "ResourceExhausted",
    "BenchmarkResult",
    "MetricsCollector",
    "reclaim_heap",
    "BenchmarkSuite",
]

"""
Pure-Python workloads: interpreter overhead, containers and strings.
"""

import random
from typing import Any, Callable


# =============================================================================
# Workload factories
# =============================================================================


def noop_factory(size: int) -> Callable[[], None]:
    """Empty call; measures harness overhead. Size is ignored."""

    def noop() -> None:
        pass

    return noop


def list_append_factory(size: int) -> Callable[[], list]:
    """Build a list of ``size`` items by appending."""

    def list_append() -> list:
        items = []
        for i in range(size):
            items.append(i)
        return items

    return list_append


def dict_lookup_factory(size: int) -> Callable[[], int]:
    """Look up every key of a ``size``-entry dict."""
    table = {i: i * 2 for i in range(size)}
    keys = list(table)

    def dict_lookup() -> int:
        total = 0
        for key in keys:
            total += table[key]
        return total

    return dict_lookup


def str_join_factory(size: int) -> Callable[[], str]:
    """Join ``size`` short strings."""
    parts = [str(i) for i in range(size)]

    def str_join() -> str:
        return ",".join(parts)

    return str_join


def sort_factory(size: int) -> Callable[[], list]:
    """Sort ``size`` shuffled integers; the input list is left untouched."""
    rng = random.Random(0)
    data = list(range(size))
    rng.shuffle(data)

    def sort() -> list:
        return sorted(data)

    return sort


def vector_add_python_factory(size: int) -> Callable[[], Any]:
    """Element-wise add of two ``size``-long float lists."""
    rng = random.Random(0)
    a = [rng.random() for _ in range(size)]
    b = [rng.random() for _ in range(size)]

    def vector_add() -> list:
        return [x + y for x, y in zip(a, b)]

    return vector_add


def reduce_sum_python_factory(size: int) -> Callable[[], float]:
    """Sum ``size`` floats with the builtin."""
    rng = random.Random(0)
    data = [rng.random() for _ in range(size)]

    def reduce_sum() -> float:
        return sum(data)

    return reduce_sum


# =============================================================================
# Benchmark Registration
# =============================================================================


def register_python_benchmarks(suite):
    """Register all pure-Python benchmarks with the suite."""

    suite.register_benchmark("python", "noop", noop_factory)
    suite.register_benchmark("python", "list-append", list_append_factory)
    suite.register_benchmark("python", "dict-lookup", dict_lookup_factory)
    suite.register_benchmark("python", "str-join", str_join_factory)
    suite.register_benchmark("python", "sort", sort_factory)

    # python baselines for the tensor workloads of the same group
    suite.register_benchmark(
        "python", "vector-add-list", vector_add_python_factory, group="vector-add"
    )
    suite.register_benchmark(
        "python", "reduce-sum-list", reduce_sum_python_factory, group="reduce-sum"
    )

"""
Basic usage: time a couple of callables and print the results.

Run with:
    python examples/basic_usage.py
"""

from rich.console import Console

from micro_benchmark import (
    BenchmarkRunner,
    BenchmarkSpec,
    MetricsCollector,
    ResourceExhausted,
)
from micro_benchmark.reporting import print_comparison, print_results


def build_squares():
    return [i * i for i in range(1000)]


def build_squares_loop():
    squares = []
    for i in range(1000):
        squares.append(i * i)
    return squares


def main():
    console = Console()
    collector = MetricsCollector(BenchmarkRunner())

    specs = [
        (BenchmarkSpec("squares-loop", 2000, build_squares_loop), "loop"),
        (BenchmarkSpec("squares-comprehension", 2000, build_squares), "comprehension"),
    ]

    for spec, variant in specs:
        try:
            collector.benchmark_function(
                spec, rounds=5, metadata={"group": "squares", "variant": variant}
            )
        except ResourceExhausted as e:
            console.print(f"[red]{e}[/red]")

    print_results(collector.get_results(), console)
    print_comparison(collector.compare_results("loop"), "loop", console)


if __name__ == "__main__":
    main()

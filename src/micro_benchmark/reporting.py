"""
Formatting and output of benchmark results.
"""

import json
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from .core.metrics import BenchmarkResult


def format_duration(ns: Optional[float]) -> str:
    """Render a nanosecond duration with a readable unit."""
    if ns is None:
        return "N/A"
    if ns < 1e3:
        return f"{ns:.1f} ns"
    if ns < 1e6:
        return f"{ns / 1e3:.3f} µs"
    if ns < 1e9:
        return f"{ns / 1e6:.3f} ms"
    return f"{ns / 1e9:.3f} s"


def result_to_dict(result: BenchmarkResult) -> Dict[str, Any]:
    """Plain-dict view of a result, including derived throughput."""
    data = asdict(result)
    data["throughput"] = result.throughput
    return data


def results_to_json(results: List[BenchmarkResult], indent: int = 2) -> str:
    return json.dumps([result_to_dict(r) for r in results], indent=indent)


def print_results(
    results: List[BenchmarkResult], console: Optional[Console] = None
) -> None:
    """Print formatted benchmark results."""
    console = console or Console()

    if not results:
        console.print("[yellow]No benchmark results available.[/yellow]")
        return

    table = Table(title="Benchmark Results")
    table.add_column("Benchmark", style="cyan")
    table.add_column("Iterations", justify="right")
    table.add_column("Avg / iter", style="yellow", justify="right")
    table.add_column("Std dev", justify="right")
    table.add_column("Ops/s", style="green", justify="right")

    for result in sorted(results, key=lambda r: r.average_duration_ns):
        std_dev = result.metadata.get("std_dev")
        rounds = result.metadata.get("rounds", 1)
        throughput = result.throughput
        table.add_row(
            result.name,
            f"{result.total_iterations:,}",
            format_duration(result.average_duration_ns),
            format_duration(std_dev) if rounds > 1 else "-",
            f"{throughput:,.0f}" if throughput else "N/A",
        )

    console.print(table)


def print_comparison(
    comparison: Dict[str, Dict[str, Any]],
    baseline: str,
    console: Optional[Console] = None,
) -> None:
    """Print a formatted comparison table."""
    console = console or Console()

    table = Table(title=f"Speedup relative to {baseline}")
    table.add_column("Benchmark", style="cyan")
    table.add_column("Variant", style="green")
    table.add_column("Avg / iter", style="yellow", justify="right")
    table.add_column("Speedup", style="magenta", justify="right")

    for group, variants in comparison.items():
        for variant, metrics in variants.items():
            speedup = f"{metrics['speedup']:.2f}x" if metrics["speedup"] else "N/A"
            table.add_row(
                group, variant, format_duration(metrics["average_duration_ns"]), speedup
            )

    console.print(table)


def print_environment(info: Dict[str, Any], console: Optional[Console] = None) -> None:
    """Print environment information as a two-column table."""
    console = console or Console()

    table = Table(title="Environment", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    for key, value in info.items():
        if isinstance(value, dict):
            value = ", ".join(f"{k}={v}" for k, v in value.items())
        elif isinstance(value, list):
            value = ", ".join(str(v) for v in value) or "-"
        table.add_row(key, str(value))

    console.print(table)

"""
Command-line interface for the micro benchmark harness.
"""

import importlib
import json
import logging
from typing import Any, Callable, List, Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.logging import RichHandler

from ..core import config
from ..core.benchmark_runner import BenchmarkRunner, BenchmarkSpec
from ..core.environment import EnvironmentInfo
from ..core.errors import InvalidSpec, ResourceExhausted
from ..core.metrics import MetricsCollector, reclaim_heap
from ..core.suite import BenchmarkSuite
from ..reporting import (
    print_comparison,
    print_environment,
    print_results,
    results_to_json,
)

app = typer.Typer(help="Micro Benchmark - time Python callables over many iterations")
console = Console()


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def load_target(target: str) -> Callable[[], Any]:
    """Resolve a ``module:attribute`` path to a callable.

    The attribute part may be dotted to reach methods on module-level objects.
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise InvalidSpec(f"Target must be in format module:callable, got {target!r}")

    try:
        obj = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidSpec(f"Cannot import module {module_name!r}: {e}") from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise InvalidSpec(f"{module_name!r} has no attribute {attr_path!r}") from e

    if not callable(obj):
        raise InvalidSpec(f"{target} is not callable")
    return obj


@app.command()
def run(
    target: str = typer.Argument(..., help="Callable to time, as module:callable"),
    name: Optional[str] = typer.Option(None, "--name", help="Label for the result"),
    iterations: int = typer.Option(
        config.DEFAULT_ITERATIONS,
        "--iterations",
        "-n",
        envvar="MICRO_BENCH_ITERATIONS",
        help="Number of timed iterations",
    ),
    rounds: int = typer.Option(
        config.DEFAULT_ROUNDS,
        "--rounds",
        "-r",
        envvar="MICRO_BENCH_ROUNDS",
        help="Number of independent rounds",
    ),
    no_reclaim: bool = typer.Option(
        not config.RECLAIM_HEAP,
        "--no-reclaim",
        help="Skip garbage collection before timing",
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Time a single callable."""
    _setup_logging(verbose)

    try:
        operation = load_target(target)
        runner = BenchmarkRunner(reclaim=None if no_reclaim else reclaim_heap)
        collector = MetricsCollector(runner)
        spec = BenchmarkSpec(
            name=name or target, iterations=iterations, operation=operation
        )
        result = collector.benchmark_function(spec, rounds=rounds)
    except InvalidSpec as e:
        rprint(f"[red]Invalid benchmark: {e}[/red]")
        raise typer.Exit(code=2)
    except ResourceExhausted as e:
        rprint(f"[red]Benchmark aborted: {e}[/red]")
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(results_to_json([result]))
    else:
        print_results([result], console)


@app.command()
def suite(
    category: Optional[str] = typer.Argument(
        None, help="Benchmark category to run, all categories if omitted"
    ),
    benchmark: Optional[str] = typer.Option(
        None, "--benchmark", "-b", help="Specific benchmark to run"
    ),
    sizes: List[int] = typer.Option(
        config.DEFAULT_SIZES, "--size", help="Problem sizes to test"
    ),
    iterations: int = typer.Option(
        config.DEFAULT_ITERATIONS,
        "--iterations",
        "-n",
        envvar="MICRO_BENCH_ITERATIONS",
        help="Number of timed iterations",
    ),
    rounds: int = typer.Option(
        config.DEFAULT_ROUNDS,
        "--rounds",
        "-r",
        envvar="MICRO_BENCH_ROUNDS",
        help="Number of independent rounds",
    ),
    baseline: str = typer.Option(
        "python", "--baseline", help="Baseline variant for comparison"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit results as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """Run registered benchmarks."""
    _setup_logging(verbose)

    if benchmark and not category:
        rprint("[red]--benchmark requires a category[/red]")
        raise typer.Exit(code=2)

    bench_suite = BenchmarkSuite()
    options = dict(sizes=sizes, iterations=iterations, rounds=rounds)

    try:
        if benchmark:
            if not as_json:
                rprint(f"[green]Running benchmark: {category}/{benchmark}[/green]")
            results = bench_suite.run_benchmark(category, benchmark, **options)
        elif category:
            if not as_json:
                rprint(f"[green]Running all benchmarks in category: {category}[/green]")
            results = bench_suite.run_category(category, **options)
        else:
            if not as_json:
                rprint("[green]Running all benchmarks...[/green]")
            results = bench_suite.run_all(**options)
    except (ValueError, InvalidSpec) as e:
        rprint(f"[red]Error running benchmarks: {e}[/red]")
        raise typer.Exit(code=2)

    if as_json:
        typer.echo(results_to_json(results))
        return

    if not results:
        rprint("[yellow]No results to display[/yellow]")
        return

    print_results(results, console)

    comparison = bench_suite.compare_results(baseline)
    if any(len(variants) > 1 for variants in comparison.values()):
        print_comparison(comparison, baseline, console)


@app.command()
def list_benchmarks(
    category: Optional[str] = typer.Option(
        None, "--category", "-c", help="Benchmark category to list"
    )
) -> None:
    """List available benchmarks."""
    benchmarks = BenchmarkSuite().list_benchmarks(category)

    if not benchmarks:
        rprint("[yellow]No benchmarks found[/yellow]")
        return

    for cat, bench_list in benchmarks.items():
        rprint(f"[cyan]{cat}[/cyan]: {', '.join(bench_list)}")


@app.command()
def env_info(
    as_json: bool = typer.Option(False, "--json", help="Emit as JSON"),
) -> None:
    """Display interpreter, library and clock information."""
    info = EnvironmentInfo().get_system_info()
    if as_json:
        typer.echo(json.dumps(info, indent=2, default=str))
    else:
        print_environment(info, console)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

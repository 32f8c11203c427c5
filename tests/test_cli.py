"""
Tests for the command-line interface and reporting helpers.
"""

import importlib
import json
import sys
import types

import pytest
from rich.console import Console
from typer.testing import CliRunner

from micro_benchmark.cli import app, load_target
from micro_benchmark.core import config
from micro_benchmark.core.errors import InvalidSpec
from micro_benchmark.core.metrics import BenchmarkResult
from micro_benchmark.reporting import (
    format_duration,
    print_comparison,
    print_results,
    result_to_dict,
    results_to_json,
)

cli_runner = CliRunner()


@pytest.fixture
def target_module(monkeypatch):
    """Importable module holding operations for the run command."""
    module = types.ModuleType("bench_targets")
    module.calls = 0

    def count():
        module.calls += 1

    def exhaust():
        raise MemoryError()

    module.count = count
    module.exhaust = exhaust
    module.not_callable = 3
    monkeypatch.setitem(sys.modules, "bench_targets", module)
    return module


class TestLoadTarget:
    def test_resolves_callable(self, target_module):
        assert load_target("bench_targets:count") is target_module.count

    def test_resolves_dotted_attribute(self):
        import os.path

        assert load_target("os:path.join") is os.path.join

    @pytest.mark.parametrize(
        "target",
        ["no_colon", ":count", "bench_targets:", "missing_module_xyz:run"],
    )
    def test_bad_targets(self, target_module, target):
        with pytest.raises(InvalidSpec):
            load_target(target)

    def test_missing_attribute(self, target_module):
        with pytest.raises(InvalidSpec, match="no attribute"):
            load_target("bench_targets:nothing")

    def test_not_callable(self, target_module):
        with pytest.raises(InvalidSpec, match="not callable"):
            load_target("bench_targets:not_callable")


class TestRunCommand:
    def test_run_json(self, target_module):
        result = cli_runner.invoke(
            app, ["run", "bench_targets:count", "-n", "10", "--json", "--no-reclaim"]
        )

        assert result.exit_code == 0, result.output
        (data,) = json.loads(result.stdout)
        assert data["name"] == "bench_targets:count"
        assert data["total_iterations"] == 10
        assert data["average_duration_ns"] >= 0
        assert target_module.calls == 11

    def test_run_rounds_and_name(self, target_module):
        result = cli_runner.invoke(
            app,
            [
                "run",
                "bench_targets:count",
                "-n",
                "5",
                "-r",
                "2",
                "--name",
                "counter",
                "--json",
            ],
        )

        assert result.exit_code == 0, result.output
        (data,) = json.loads(result.stdout)
        assert data["name"] == "counter"
        assert data["total_iterations"] == 10
        assert data["metadata"]["rounds"] == 2
        assert target_module.calls == 12

    def test_run_table(self, target_module):
        result = cli_runner.invoke(app, ["run", "bench_targets:count", "-n", "3"])
        assert result.exit_code == 0, result.output
        assert "Benchmark Results" in result.output

    def test_invalid_iterations(self, target_module):
        result = cli_runner.invoke(app, ["run", "bench_targets:count", "-n", "0"])
        assert result.exit_code == 2
        assert "Invalid benchmark" in result.output
        assert target_module.calls == 0

    def test_bad_target(self):
        result = cli_runner.invoke(app, ["run", "no-colon-here"])
        assert result.exit_code == 2

    def test_resource_exhausted(self, target_module):
        result = cli_runner.invoke(app, ["run", "bench_targets:exhaust", "-n", "5"])
        assert result.exit_code == 1
        assert "Benchmark aborted" in result.output


class TestSuiteCommands:
    def test_suite_single_benchmark_json(self):
        result = cli_runner.invoke(
            app, ["suite", "python", "-b", "noop", "--size", "4", "-n", "5", "--json"]
        )

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [d["name"] for d in data] == ["noop_size_4"]
        assert data[0]["metadata"]["category"] == "python"

    def test_suite_category_table(self):
        result = cli_runner.invoke(app, ["suite", "python", "--size", "4", "-n", "2"])
        assert result.exit_code == 0, result.output
        assert "Benchmark Results" in result.output

    def test_suite_unknown_category(self):
        result = cli_runner.invoke(app, ["suite", "nope", "-n", "1"])
        assert result.exit_code == 2
        assert "Unknown benchmark category" in result.output

    def test_benchmark_needs_category(self):
        result = cli_runner.invoke(app, ["suite", "-b", "noop"])
        assert result.exit_code == 2

    def test_list_benchmarks(self):
        result = cli_runner.invoke(app, ["list-benchmarks"])
        assert result.exit_code == 0
        assert "noop" in result.output
        assert "vector-add" in result.output

    def test_list_unknown_category(self):
        result = cli_runner.invoke(app, ["list-benchmarks", "-c", "nope"])
        assert result.exit_code == 0
        assert "No benchmarks found" in result.output

    def test_env_info_json(self):
        result = cli_runner.invoke(app, ["env-info", "--json"])
        assert result.exit_code == 0, result.output
        info = json.loads(result.stdout)
        assert "python_version" in info
        assert "pytorch_version" in info


class TestReporting:
    @pytest.mark.parametrize(
        "ns,expected",
        [
            (None, "N/A"),
            (12.0, "12.0 ns"),
            (1500.0, "1.500 µs"),
            (2_500_000.0, "2.500 ms"),
            (3e9, "3.000 s"),
        ],
    )
    def test_format_duration(self, ns, expected):
        assert format_duration(ns) == expected

    def test_result_to_dict(self):
        data = result_to_dict(BenchmarkResult("x", 4, 250.0, 1000, {"size": 1}))
        assert data == {
            "name": "x",
            "total_iterations": 4,
            "average_duration_ns": 250.0,
            "total_duration_ns": 1000,
            "metadata": {"size": 1},
            "throughput": 4e6,
        }

    def test_results_to_json(self):
        data = json.loads(results_to_json([BenchmarkResult("x", 1, 0.0)]))
        assert data[0]["throughput"] is None

    def test_print_results(self):
        console = Console(record=True, width=120)
        results = [BenchmarkResult("slow", 1, 2e6), BenchmarkResult("fast", 1, 10.0)]
        print_results(results, console)
        text = console.export_text()
        assert text.index("fast") < text.index("slow")
        assert "2.000 ms" in text

    def test_print_no_results(self):
        console = Console(record=True)
        print_results([], console)
        assert "No benchmark results" in console.export_text()

    def test_print_comparison(self):
        console = Console(record=True, width=120)
        comparison = {
            "add": {
                "python": {
                    "average_duration_ns": 10.0,
                    "speedup": 1.0,
                    "throughput": 1e8,
                },
                "pytorch": {
                    "average_duration_ns": 5.0,
                    "speedup": 2.0,
                    "throughput": 2e8,
                },
            }
        }
        print_comparison(comparison, "python", console)
        assert "2.00x" in console.export_text()


class TestConfig:
    def test_env_bool(self, monkeypatch):
        monkeypatch.setenv("MB_FLAG", "yes")
        assert config.env_bool("MB_FLAG", default=False) is True
        monkeypatch.setenv("MB_FLAG", "off")
        assert config.env_bool("MB_FLAG", default=True) is False
        monkeypatch.setenv("MB_FLAG", "maybe")
        assert config.env_bool("MB_FLAG", default=True) is True
        monkeypatch.delenv("MB_FLAG")
        assert config.env_bool("MB_FLAG", default=False) is False

    def test_env_int_list(self, monkeypatch):
        monkeypatch.setenv("MB_SIZES", "1, 2,3")
        assert config.env_int_list("MB_SIZES", [9]) == [1, 2, 3]
        monkeypatch.setenv("MB_SIZES", "1,x")
        assert config.env_int_list("MB_SIZES", [9]) == [9]
        monkeypatch.delenv("MB_SIZES")
        assert config.env_int_list("MB_SIZES", [9]) == [9]

    def test_env_int(self, monkeypatch):
        monkeypatch.setenv("MB_COUNT", " 25 ")
        assert config.env_int("MB_COUNT", 7) == 25
        monkeypatch.setenv("MB_COUNT", "abc")
        assert config.env_int("MB_COUNT", 7) == 7
        monkeypatch.setenv("MB_COUNT", "0")
        assert config.env_int("MB_COUNT", 7) == 7
        assert config.env_int("MB_COUNT", 7, minimum=0) == 0
        monkeypatch.delenv("MB_COUNT")
        assert config.env_int("MB_COUNT", 7) == 7

    def test_malformed_env_does_not_break_import(self, monkeypatch):
        monkeypatch.setenv("MICRO_BENCH_ITERATIONS", "abc")
        monkeypatch.setenv("MICRO_BENCH_ROUNDS", "-3")
        try:
            reloaded = importlib.reload(config)
            assert reloaded.DEFAULT_ITERATIONS == 1000
            assert reloaded.DEFAULT_ROUNDS == 1
        finally:
            monkeypatch.undo()
            importlib.reload(config)

    def test_defaults(self):
        assert config.DEFAULT_ITERATIONS > 0
        assert config.DEFAULT_ROUNDS > 0
        assert config.DEFAULT_SIZES

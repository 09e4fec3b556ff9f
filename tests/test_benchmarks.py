"""Tests for throughput benchmarks."""

import pytest
from rich.console import Console

from flakeid.benchmarks import (
    BenchmarkResult,
    format_time,
    print_benchmark_results,
    run_multi_thread_benchmark,
    run_single_thread_benchmark,
)
from flakeid.snowflake import SnowflakeGenerator


def test_run_single_thread_benchmark():
    """Single-threaded benchmark with a small size."""
    result = run_single_thread_benchmark(iterations=1_000)

    assert isinstance(result, BenchmarkResult)
    assert result.threads == 1
    assert result.iterations == 1_000
    assert result.unique == 1_000
    assert result.elapsed >= 0
    assert result.ids_per_ms > 0


def test_run_multi_thread_benchmark_shares_one_generator():
    gen = SnowflakeGenerator(machine_id=12)
    result = run_multi_thread_benchmark(iterations=1_003, threads=4, generator=gen)

    assert result.threads == 4
    assert result.iterations == 1_003
    assert result.unique == 1_003
    assert gen.last_timestamp >= 0


def test_multi_thread_benchmark_rejects_zero_threads():
    with pytest.raises(ValueError, match="at least 1"):
        run_multi_thread_benchmark(iterations=10, threads=0)


def test_format_time():
    assert format_time(0.0000567) == "56.70 us"
    assert format_time(0.00234) == "2.34 ms"
    assert format_time(1.5) == "1.50 s"
    assert format_time(100.3) == "1 min 40.30 s"


def test_print_benchmark_results():
    console = Console(record=True, width=120)
    results = [BenchmarkResult(iterations=2_000, threads=1, elapsed=0.002, unique=2_000)]

    print_benchmark_results(results, console=console)

    text = console.export_text()
    assert "Snowflake Generator Throughput" in text
    assert "2,000" in text
    assert "1,000.0" in text

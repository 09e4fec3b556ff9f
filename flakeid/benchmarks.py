"""Throughput benchmarks for the Snowflake generator."""

from __future__ import annotations

import os
import platform
import timeit
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.table import Table

from .snowflake import SnowflakeGenerator

BENCHMARK_MACHINE_ID = 897


@dataclass
class BenchmarkResult:
    """Result of a single benchmark run."""

    iterations: int
    threads: int
    elapsed: float  # seconds
    unique: int  # distinct IDs among those generated

    @property
    def ids_per_ms(self) -> float:
        if self.elapsed <= 0:
            return float(self.iterations)
        return self.iterations / (self.elapsed * 1000)


def format_time(seconds: float) -> str:
    """Format time in seconds to human-readable string with 2 decimal precision.

    Examples:
        0.0000567 -> "56.70 us"
        0.00234 -> "2.34 ms"
        0.5 -> "500.00 ms"
        1.5 -> "1.50 s"
        100.3 -> "1 min 40.30 s"
    """
    if seconds >= 60:
        minutes = int(seconds // 60)
        remaining_seconds = seconds % 60
        return f"{minutes} min {remaining_seconds:.2f} s"
    elif seconds >= 1:
        return f"{seconds:.2f} s"
    elif seconds >= 0.001:
        return f"{seconds * 1000:.2f} ms"
    else:
        return f"{seconds * 1_000_000:.2f} us"


def run_single_thread_benchmark(
    iterations: int = 1_000_000,
    generator: SnowflakeGenerator | None = None,
) -> BenchmarkResult:
    """Generate ``iterations`` IDs one call at a time from the calling thread."""
    if generator is None:
        generator = SnowflakeGenerator(BENCHMARK_MACHINE_ID)

    start = timeit.default_timer()
    ids = [generator.generate() for _ in range(iterations)]
    elapsed = timeit.default_timer() - start

    return BenchmarkResult(
        iterations=iterations,
        threads=1,
        elapsed=elapsed,
        unique=len(set(ids)),
    )


def run_multi_thread_benchmark(
    iterations: int = 1_000_000,
    threads: int = 50,
    generator: SnowflakeGenerator | None = None,
) -> BenchmarkResult:
    """Generate ``iterations`` IDs spread over a pool of ``threads`` workers."""
    if threads < 1:
        raise ValueError(f"Threads must be at least 1, got {threads}")
    if generator is None:
        generator = SnowflakeGenerator(BENCHMARK_MACHINE_ID)

    # Split the work into one batch per thread
    base, extra = divmod(iterations, threads)
    batches = [base + (1 if i < extra else 0) for i in range(threads)]

    def worker(count: int) -> list[int]:
        return [generator.generate() for _ in range(count)]

    start = timeit.default_timer()
    with ThreadPoolExecutor(max_workers=threads) as pool:
        results = list(pool.map(worker, batches))
    elapsed = timeit.default_timer() - start

    unique = set()
    for batch in results:
        unique.update(batch)

    return BenchmarkResult(
        iterations=iterations,
        threads=threads,
        elapsed=elapsed,
        unique=len(unique),
    )


def print_benchmark_results(results: list[BenchmarkResult], console: Console | None = None) -> None:
    """Print benchmark results in a formatted table."""
    console = console or Console()

    table = Table(title="Snowflake Generator Throughput", box=box.ROUNDED)
    table.add_column("Threads", justify="right")
    table.add_column("IDs", justify="right")
    table.add_column("Unique", justify="right")
    table.add_column("Time", justify="right")
    table.add_column("IDs/ms", justify="right")

    for r in results:
        table.add_row(
            str(r.threads),
            f"{r.iterations:,}",
            f"{r.unique:,}",
            format_time(r.elapsed),
            f"{r.ids_per_ms:,.1f}",
        )

    console.print(f"[dim]{platform.platform()} | {os.cpu_count() or 'Unknown'} CPUs[/dim]")
    console.print(table)

"""CLI entry point for flakeid package.

Usage:
    python -m flakeid generate -n 10                 # Print ten new IDs
    python -m flakeid generate --prefix IND --suffix TD
    python -m flakeid decode 7263049182973952        # Show the fields of an ID
    python -m flakeid bench --iterations 100000      # Measure throughput
"""

import argparse
import sys
from datetime import datetime, timezone

from rich import box
from rich.console import Console
from rich.table import Table

from . import env
from .errors import ClockRegressionError, ConfigurationError
from .formatting import format_id, parse_id
from .log import configure_logging
from .snowflake import SnowflakeGenerator, decode_parts


def _add_generator_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--machine-id",
        type=int,
        default=env.FLAKEID_MACHINE_ID,
        help="Machine ID, 0-1023 (default: $FLAKEID_MACHINE_ID or 0)",
    )
    parser.add_argument(
        "--epoch",
        type=int,
        default=env.FLAKEID_EPOCH,
        help="Custom epoch in milliseconds (default: $FLAKEID_EPOCH or 2024-01-01 UTC)",
    )
    parser.add_argument(
        "--prefix",
        default=env.FLAKEID_PREFIX,
        help="Text placed before each ID (default: $FLAKEID_PREFIX)",
    )
    parser.add_argument(
        "--suffix",
        default=env.FLAKEID_SUFFIX,
        help="Text placed after each ID (default: $FLAKEID_SUFFIX)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flakeid",
        description="flakeid command-line interface",
    )
    parser.add_argument(
        "--log-level",
        default=env.FLAKEID_LOG_LEVEL,
        help="Logging level (default: $FLAKEID_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate new IDs",
    )
    generate_parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=1,
        help="Number of IDs to generate (default: 1)",
    )
    _add_generator_options(generate_parser)

    # decode
    decode_parser = subparsers.add_parser(
        "decode",
        help="Show the timestamp, machine ID and sequence of an ID",
    )
    decode_parser.add_argument("id", help="ID to decode, with or without prefix/suffix")
    _add_generator_options(decode_parser)

    # bench
    bench_parser = subparsers.add_parser(
        "bench",
        help="Measure generator throughput",
    )
    bench_parser.add_argument(
        "--iterations",
        type=int,
        default=1_000_000,
        help="IDs to generate per run (default: 1000000)",
    )
    bench_parser.add_argument(
        "--threads",
        type=int,
        default=50,
        help="Worker threads for the concurrent run (default: 50)",
    )

    return parser


def run_generate(args: argparse.Namespace, console: Console) -> None:
    generator = SnowflakeGenerator(machine_id=args.machine_id, epoch=args.epoch)
    for id_val in generator.get(args.count):
        console.print(format_id(id_val, args.prefix, args.suffix), markup=False, highlight=False)


def run_decode(args: argparse.Namespace, console: Console) -> None:
    id_val = parse_id(args.id, args.prefix, args.suffix)
    parts = decode_parts(id_val, args.epoch)
    try:
        issued_at = datetime.fromtimestamp(parts.timestamp / 1000, tz=timezone.utc)
        issued_text = issued_at.isoformat(timespec="milliseconds")
    except (OverflowError, OSError, ValueError):
        # Bits above the 64-bit layout push the timestamp past datetime's range
        issued_text = "out of range"

    table = Table(title=f"Snowflake ID {id_val}", box=box.SIMPLE)
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("timestamp (ms)", str(parts.timestamp))
    table.add_row("timestamp (UTC)", issued_text)
    table.add_row("machine_id", str(parts.machine_id))
    table.add_row("sequence", str(parts.sequence))
    console.print(table)

    if parts.machine_id != args.machine_id:
        console.print(
            f"[yellow]Note: machine ID {parts.machine_id} differs from configured {args.machine_id}[/yellow]"
        )


def run_bench(args: argparse.Namespace, console: Console) -> None:
    from .benchmarks import (
        print_benchmark_results,
        run_multi_thread_benchmark,
        run_single_thread_benchmark,
    )

    results = [
        run_single_thread_benchmark(iterations=args.iterations),
        run_multi_thread_benchmark(iterations=args.iterations, threads=args.threads),
    ]
    print_benchmark_results(results, console=console)


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    console = Console()
    err_console = Console(stderr=True)

    commands = {
        "generate": run_generate,
        "decode": run_decode,
        "bench": run_bench,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        return 0

    try:
        configure_logging(args.log_level)
        command(args, console)
    except (ConfigurationError, ClockRegressionError, ValueError) as e:
        err_console.print(f"Error: {e}", style="red", markup=False, highlight=False)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

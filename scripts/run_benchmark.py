#!/usr/bin/env python3
"""
Memoization benchmark CLI - compare a direct call with its memoized version.

Usage:
    python scripts/run_benchmark.py
    python scripts/run_benchmark.py --workload busy --duration-ms 10
    python scripts/run_benchmark.py --workload sort --size 500000 --seed 42
    python scripts/run_benchmark.py --sink log --verbose

Workloads:
    sleep - Sleeps for --duration-ms milliseconds
    busy  - Spins on the CPU for --duration-ms milliseconds
    sort  - Sorts --size random floats with numpy

Sinks:
    console - Print each verdict as JSON (default, or MEMOBENCH_SINK)
    log     - Send each verdict to the logger
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from memobench.benchmark import benchmark_memoization  # noqa: E402
from memobench.config import (  # noqa: E402
    DEFAULT_SINK,
    DEFAULT_SORT_SIZE,
    DEFAULT_WORKLOAD,
    DEFAULT_WORKLOAD_MS,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    OUTPUT_SINKS,
    get_cache_maxsize,
)
from memobench.cache import IdentityMemoCache  # noqa: E402
from memobench.report import get_output_sink  # noqa: E402
from memobench.workloads import get_workload  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Benchmark a function against its memoized version",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--workload",
        type=str,
        default=DEFAULT_WORKLOAD,
        choices=["sleep", "busy", "sort"],
        help=f"Function to benchmark (default: {DEFAULT_WORKLOAD})",
    )
    parser.add_argument(
        "--duration-ms",
        type=float,
        default=DEFAULT_WORKLOAD_MS,
        help=f"Duration of sleep/busy workloads in ms (default: {DEFAULT_WORKLOAD_MS})",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=DEFAULT_SORT_SIZE,
        help=f"Array size for the sort workload (default: {DEFAULT_SORT_SIZE})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for the sort workload (default: 0)",
    )
    parser.add_argument(
        "--sink",
        type=str,
        default=DEFAULT_SINK,
        choices=OUTPUT_SINKS,
        help=f"Where verdicts are written: console or log (default: {DEFAULT_SINK})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (phase timings)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if args.workload == "sort":
        workload_kwargs = {"size": args.size, "seed": args.seed}
    else:
        workload_kwargs = {"ms": args.duration_ms}

    try:
        func = get_workload(args.workload, **workload_kwargs)
        sink = get_output_sink(args.sink)
        cache = IdentityMemoCache(maxsize=get_cache_maxsize())
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=" * 60)
    print("Memoization Benchmark")
    print("=" * 60)
    print(f"  Workload: {args.workload} {workload_kwargs}")
    print(f"  Sink:     {sink.name}")
    print("=" * 60 + "\n")

    benchmark_memoization(func, cache=cache, sink=sink)
    return 0


if __name__ == "__main__":
    sys.exit(main())

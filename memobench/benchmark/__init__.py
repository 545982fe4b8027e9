"""
Benchmark module.

Provides the memoization benchmark:
- compare: Turns two timings into a Verdict
- Verdict / FasterFunction: Comparison outcome
- BenchmarkRunner: Runs the three timed phases
- benchmark_memoization: One-call entry point with default collaborators
"""

from __future__ import annotations

from typing import Any, Callable

from memobench import config
from memobench.benchmark.comparator import FasterFunction, Verdict, compare
from memobench.benchmark.runner import BenchmarkRunner
from memobench.cache import IdentityMemoCache, MemoCache
from memobench.report import OutputSink, get_output_sink
from memobench.timing import Clock, PerfCounterClock

__all__ = [
    "FasterFunction",
    "Verdict",
    "compare",
    "BenchmarkRunner",
    "benchmark_memoization",
]


def benchmark_memoization(
    func: Callable[[], Any],
    clock: Clock | None = None,
    cache: MemoCache | None = None,
    sink: OutputSink | None = None,
) -> None:
    """
    Benchmark `func` against its memoized counterpart.

    Args:
        func: Zero-argument function to benchmark
        clock: Defaults to PerfCounterClock
        cache: Defaults to a fresh IdentityMemoCache bounded by
            MEMOBENCH_CACHE_MAXSIZE
        sink: Defaults to the sink named by MEMOBENCH_SINK (console)

    Raises:
        ValueError: If a default is needed and its setting is invalid;
            raised before `func` is called
    """
    if cache is None:
        cache = IdentityMemoCache(maxsize=config.get_cache_maxsize())
    if sink is None:
        sink = get_output_sink(config.DEFAULT_SINK)

    runner = BenchmarkRunner(
        clock=clock or PerfCounterClock(),
        cache=cache,
        sink=sink,
    )
    runner.run(func)

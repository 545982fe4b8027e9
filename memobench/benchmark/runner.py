"""
Benchmark runner comparing direct calls with memoized calls.

A run has three timed phases, executed strictly in order:

1. Direct: call the function and time it (the baseline).
2. Memoization setup: ask the cache for the function's value. The cache
   has not seen this function yet, so it calls it and stores the result.
3. Cached access: ask the cache again. This must be a hit and must not
   call the function.

Phases 2 and 3 are each compared against the phase 1 baseline, which is
measured once and reused for both verdicts.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from memobench.benchmark.comparator import compare
from memobench.cache.memo import describe_callable
from memobench.config import (
    DIRECT_VS_CACHED_ACCESS_LABEL,
    DIRECT_VS_MEMO_SETUP_LABEL,
    TIME_UNIT,
)

if TYPE_CHECKING:
    from memobench.cache.memo import MemoCache
    from memobench.report.sinks import OutputSink
    from memobench.timing.clock import Clock

logger = logging.getLogger(__name__)


class BenchmarkRunner:
    """
    Times one function directly and through a memoizing cache.

    The runner holds no state between runs; the cache it is given may.
    Exceptions raised by the function propagate out of run() unchanged,
    and no verdict is emitted for a phase that did not complete.
    """

    def __init__(self, clock: Clock, cache: MemoCache, sink: OutputSink) -> None:
        """
        Initialize the runner.

        Args:
            clock: Millisecond clock used for every sample
            cache: Memoizing cache keyed on function identity
            sink: Receives the two labelled verdicts
        """
        self._clock = clock
        self._cache = cache
        self._sink = sink

    def run(self, func: Callable[[], Any]) -> None:
        """
        Benchmark `func` and emit two verdicts to the sink.

        `func` is called twice in total: once directly and once by the
        cache on its miss. The cached access does not call it.

        Args:
            func: Zero-argument function to benchmark
        """
        logger.info(f"Benchmarking {describe_callable(func)}")

        # Phase 1: direct call, result discarded
        start = self._clock.now()
        func()
        direct_ms = self._clock.elapsed_since(start)

        # Phase 2: first request through the cache (miss)
        start = self._clock.now()
        self._cache.get_or_compute(func)
        first_memo_ms = self._clock.elapsed_since(start)

        self._sink.emit(DIRECT_VS_MEMO_SETUP_LABEL, compare(direct_ms, first_memo_ms))

        # Phase 3: cached access (hit)
        start = self._clock.now()
        self._cache.get_or_compute(func)
        second_memo_ms = self._clock.elapsed_since(start)

        self._sink.emit(DIRECT_VS_CACHED_ACCESS_LABEL, compare(direct_ms, second_memo_ms))

        logger.debug(
            f"Phase timings ({TIME_UNIT}): direct={direct_ms:.4f}, "
            f"memo setup={first_memo_ms:.4f}, cached access={second_memo_ms:.4f}"
        )

    def __repr__(self) -> str:
        return f"BenchmarkRunner(clock={self._clock!r}, cache={self._cache!r}, sink={self._sink!r})"

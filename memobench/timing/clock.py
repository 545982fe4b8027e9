"""
Monotonic clocks returning timestamps in milliseconds.

Only the difference between two samples of the same clock is meaningful;
the epoch is arbitrary.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable


class Clock(ABC):
    """
    Source of monotonically non-decreasing timestamps.

    Implementations must never go backwards; a Measurement is computed by
    subtracting an earlier sample from a later one and is assumed to be
    non-negative.
    """

    @abstractmethod
    def now(self) -> float:
        """Return the current timestamp in milliseconds."""
        ...

    def elapsed_since(self, start: float) -> float:
        """Milliseconds between `start` and a fresh sample."""
        return self.now() - start

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PerfCounterClock(Clock):
    """Production clock backed by time.perf_counter()."""

    def now(self) -> float:
        return time.perf_counter() * 1000


class ManualClock(Clock):
    """
    Deterministic clock for tests and reproducible runs.

    Samples are served from `samples` in order. Once they run out, each
    call advances the time by `step` milliseconds.
    """

    def __init__(
        self,
        samples: Iterable[float] = (),
        start: float = 0.0,
        step: float = 0.0,
    ) -> None:
        """
        Initialize the clock.

        Args:
            samples: Timestamps to return, in order, before stepping
            start: Time reported once samples are exhausted
            step: Milliseconds added on each call after samples run out

        Raises:
            ValueError: If samples decrease or step is negative
        """
        queued = list(samples)
        if any(later < earlier for earlier, later in zip(queued, queued[1:])):
            raise ValueError("ManualClock samples must be non-decreasing")
        if step < 0:
            raise ValueError(f"step must be non-negative, got {step}")

        self._samples: deque[float] = deque(queued)
        self._current = max([start, *queued])
        self._step = step
        self.calls = 0

    def advance(self, ms: float) -> None:
        """Move the clock forward by `ms` milliseconds."""
        if ms < 0:
            raise ValueError(f"Cannot move clock backwards by {ms}ms")
        self._current += ms

    def now(self) -> float:
        self.calls += 1
        if self._samples:
            return self._samples.popleft()
        value = self._current
        self._current += self._step
        return value

    def __repr__(self) -> str:
        return f"ManualClock(now={self._current!r}, step={self._step!r})"

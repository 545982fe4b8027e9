"""
Ready-made target functions for demonstrating the benchmark.

Each factory returns a zero-argument callable. Call the factory once and
pass the same returned object to the benchmark; a new call to the
factory produces a new function with a new identity.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np

from memobench.config import DEFAULT_SORT_SIZE, DEFAULT_WORKLOAD_MS


def sleep_for(ms: float = DEFAULT_WORKLOAD_MS) -> Callable[[], float]:
    """
    Workload that sleeps for `ms` milliseconds and returns `ms`.

    Raises:
        ValueError: If ms is negative
    """
    if ms < 0:
        raise ValueError(f"Duration must be non-negative, got {ms}ms")

    def sleep_workload() -> float:
        time.sleep(ms / 1000)
        return ms

    return sleep_workload


def busy_wait(ms: float = DEFAULT_WORKLOAD_MS) -> Callable[[], int]:
    """
    Workload that spins on the CPU for `ms` milliseconds.

    Returns the number of loop iterations, so the work is observable.

    Raises:
        ValueError: If ms is negative
    """
    if ms < 0:
        raise ValueError(f"Duration must be non-negative, got {ms}ms")

    def busy_wait_workload() -> int:
        deadline = time.perf_counter() + ms / 1000
        spins = 0
        while time.perf_counter() < deadline:
            spins += 1
        return spins

    return busy_wait_workload


def sort_array(size: int = DEFAULT_SORT_SIZE, seed: int | None = 0) -> Callable[[], np.ndarray]:
    """
    Workload that sorts a fixed array of `size` random floats.

    The input array is generated once; every call sorts a copy and returns
    the sorted result, leaving the input untouched.

    Raises:
        ValueError: If size is negative
    """
    if size < 0:
        raise ValueError(f"Array size must be non-negative, got {size}")

    data = np.random.default_rng(seed).random(size)

    def sort_workload() -> np.ndarray:
        return np.sort(data)

    return sort_workload


def get_workload(name: str, **kwargs) -> Callable[[], Any]:
    """
    Get a workload by name.

    Args:
        name: Workload identifier (sleep, busy, sort)
        **kwargs: Arguments passed to the workload factory (ms, size, seed)

    Returns:
        Zero-argument callable to benchmark

    Raises:
        ValueError: If workload name is unknown
    """
    workloads = {
        "sleep": sleep_for,
        "busy": busy_wait,
        "sort": sort_array,
    }

    if name not in workloads:
        available = ", ".join(workloads.keys())
        raise ValueError(f"Unknown workload '{name}'. Available: {available}")

    return workloads[name](**kwargs)

"""
Unit tests for demo workloads.
"""

import time

import numpy as np
import pytest

from memobench.workloads import busy_wait, get_workload, sleep_for, sort_array


class TestSleepFor:
    """Test the sleeping workload."""

    def test_sleeps_and_returns_duration(self):
        """The workload sleeps at least ms and returns it."""
        func = sleep_for(2.0)
        start = time.perf_counter()
        assert func() == 2.0
        assert time.perf_counter() - start >= 0.002

    def test_negative_duration_raises(self):
        """Negative durations are rejected."""
        with pytest.raises(ValueError):
            sleep_for(-1.0)


class TestBusyWait:
    """Test the spinning workload."""

    def test_spins_for_duration(self):
        """The workload runs at least ms and reports its spins."""
        func = busy_wait(2.0)
        start = time.perf_counter()
        spins = func()
        assert time.perf_counter() - start >= 0.002
        assert spins > 0

    def test_zero_duration(self):
        """A zero duration returns immediately."""
        assert busy_wait(0.0)() >= 0

    def test_negative_duration_raises(self):
        """Negative durations are rejected."""
        with pytest.raises(ValueError):
            busy_wait(-0.5)


class TestSortArray:
    """Test the numpy sort workload."""

    def test_returns_sorted_copy(self):
        """Each call returns a sorted array of the requested size."""
        result = sort_array(size=1000, seed=1)()
        assert result.shape == (1000,)
        assert np.all(np.diff(result) >= 0)

    def test_same_seed_same_result(self):
        """The input is deterministic for a fixed seed."""
        np.testing.assert_array_equal(sort_array(100, seed=7)(), sort_array(100, seed=7)())

    def test_calls_return_new_arrays(self):
        """Repeated calls do real work instead of returning one object."""
        func = sort_array(100)
        assert func() is not func()

    def test_negative_size_raises(self):
        """Negative sizes are rejected."""
        with pytest.raises(ValueError):
            sort_array(-1)


class TestGetWorkload:
    """Test the workload factory."""

    def test_known_names(self):
        """Each name builds a zero-argument callable."""
        assert get_workload("sleep", ms=0.0)() == 0.0
        assert get_workload("busy", ms=0.0)() >= 0
        assert len(get_workload("sort", size=10)()) == 10

    def test_each_call_has_new_identity(self):
        """Factories return a fresh function every time."""
        assert get_workload("sleep", ms=0.0) is not get_workload("sleep", ms=0.0)

    def test_unknown_name_raises(self):
        """Unknown names raise ValueError listing the options."""
        with pytest.raises(ValueError, match="Unknown workload 'fib'"):
            get_workload("fib")

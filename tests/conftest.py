"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

import importlib
from pathlib import Path

import pytest

from memobench import config
from memobench.cache import IdentityMemoCache
from memobench.report import RecordingSink


class CountingTarget:
    """Zero-argument callable that counts its invocations."""

    def __init__(self, value: object = "result", error: Exception | None = None) -> None:
        self.value = value
        self.error = error
        self.calls = 0

    def __call__(self) -> object:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def target() -> CountingTarget:
    """Return a target function with a call counter."""
    return CountingTarget()


@pytest.fixture
def cache() -> IdentityMemoCache:
    """Return an empty unbounded identity cache."""
    return IdentityMemoCache()


@pytest.fixture
def sink() -> RecordingSink:
    """Return a sink that records verdicts in memory."""
    return RecordingSink()


@pytest.fixture
def make_target() -> type[CountingTarget]:
    """Return the CountingTarget class for building custom targets."""
    return CountingTarget


@pytest.fixture
def configure_env(monkeypatch):
    """
    Return a function that sets environment overrides and reloads config.

    Unlisted MEMOBENCH_* and LOG_LEVEL variables are removed first, so each
    call starts from the defaults. Config is reloaded again on teardown.
    """

    def apply(**env: str):
        for name in ("MEMOBENCH_SINK", "MEMOBENCH_CACHE_MAXSIZE", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config)

    yield apply

    monkeypatch.undo()
    importlib.reload(config)

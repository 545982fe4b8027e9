"""
Memoizing cache keyed on the identity of the function being memoized.

Two callables that behave the same (or compare equal) are still cached
separately; only the exact same object hits an existing entry.

Usage:
    with IdentityMemoCache() as cache:
        value = cache.get_or_compute(load_report)   # calls load_report()
        value = cache.get_or_compute(load_report)   # cached, no call
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Any, Callable

logger = logging.getLogger(__name__)


class MemoCache(ABC):
    """
    Abstract memoizing cache for zero-argument functions.

    get_or_compute() must call `func` on the first request for a given
    function and return the stored value, without calling `func`, on later
    requests for the same function.
    """

    @abstractmethod
    def get_or_compute(self, func: Callable[[], Any]) -> Any:
        """
        Return the cached result of `func`, calling it on a miss.

        Exceptions raised by `func` propagate unchanged and nothing is
        stored for it.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every cached result."""
        ...

    def __enter__(self) -> "MemoCache":
        return self

    def __exit__(self, *args) -> None:
        self.clear()


class IdentityMemoCache(MemoCache):
    """
    Cache mapping id(func) to the value func() returned.

    The function object is stored next to its value so its id cannot be
    reused by another object while the entry exists.

    Attributes:
        hits: Number of lookups answered from the cache
        misses: Number of lookups that called the function

    hits and misses are cumulative over the cache's lifetime; clear()
    and invalidate() drop entries but keep the counters.
    """

    def __init__(self, maxsize: int | None = None) -> None:
        """
        Initialize the cache.

        Args:
            maxsize: Keep at most this many functions, evicting the least
                recently used one. None means unbounded. With maxsize=1 the
                cache recomputes whenever a different function is requested.

        Raises:
            ValueError: If maxsize is smaller than 1
        """
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be at least 1, got {maxsize}")

        self._maxsize = maxsize
        self._entries: OrderedDict[int, tuple[Callable[[], Any], Any]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def maxsize(self) -> int | None:
        return self._maxsize

    def get_or_compute(self, func: Callable[[], Any]) -> Any:
        key = id(func)
        entry = self._entries.get(key)
        if entry is not None and entry[0] is func:
            self.hits += 1
            self._entries.move_to_end(key)
            return entry[1]

        self.misses += 1
        logger.debug(f"Cache miss for {describe_callable(func)}, computing")
        value = func()

        self._entries[key] = (func, value)
        self._entries.move_to_end(key)
        self._evict()
        return value

    def _evict(self) -> None:
        """Drop least recently used entries beyond maxsize."""
        if self._maxsize is None:
            return
        while len(self._entries) > self._maxsize:
            _, (func, _value) = self._entries.popitem(last=False)
            logger.debug(f"Evicted cached result of {describe_callable(func)}")

    def invalidate(self, func: Callable[[], Any]) -> bool:
        """
        Forget the cached result of `func`.

        Returns:
            True if an entry was removed
        """
        entry = self._entries.get(id(func))
        if entry is None or entry[0] is not func:
            return False
        del self._entries[id(func)]
        return True

    def clear(self) -> None:
        """Drop every cached result. hits and misses are kept."""
        self._entries.clear()

    def __contains__(self, func: object) -> bool:
        entry = self._entries.get(id(func))
        return entry is not None and entry[0] is func

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"IdentityMemoCache(size={len(self)}, maxsize={self._maxsize}, "
            f"hits={self.hits}, misses={self.misses})"
        )


def describe_callable(func: Callable[[], Any]) -> str:
    """Readable name for log messages."""
    return getattr(func, "__qualname__", None) or repr(func)

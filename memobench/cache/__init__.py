"""
Cache module.

Provides memoization keyed on function identity:
- MemoCache: Abstract get-or-compute cache
- IdentityMemoCache: In-memory cache keyed on id(func), optional LRU bound
"""

from memobench.cache.memo import IdentityMemoCache, MemoCache

__all__ = [
    "MemoCache",
    "IdentityMemoCache",
]

"""Cache port - Injectable caching abstraction.

Geocoding the same place twice costs a rate-limited network round
trip, so adapters that talk to slow services take a cache through
this protocol instead of keeping module-level dictionaries.
"""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementation: adapters/cache/memory_cache.py (InMemoryCache)
    """

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value or compute, cache and return it.

        A value of None is cached like any other. If ``compute_fn``
        raises, nothing is cached and the exception propagates.
        """
        ...

    def clear(self) -> int:
        """Drop every entry.

        Returns:
            Number of entries that were cleared.
        """
        ...

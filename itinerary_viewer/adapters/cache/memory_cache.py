"""Thread-safe in-memory cache.

Used by the geocoder so that a place looked up for one day's map is
not requested again when the user comes back to that day. Misses are
cached too, as None.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """In-memory cache with an optional size bound (FIFO eviction).

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[Place](name="geocode", max_size=512)
        place = cache.get_or_compute("gellért budapest", lambda: lookup(...))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: Dict[str, Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"itinerary_viewer.cache.{self.name}")

    def _set(self, key: str, value: T) -> None:
        with self._lock:
            if (
                self.max_size is not None
                and key not in self._store
                and len(self._store) >= self.max_size
            ):
                oldest_key = next(iter(self._store))
                del self._store[oldest_key]
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": oldest_key, "reason": "max_size"},
                )
            self._store[key] = value

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Return the cached value for ``key`` or compute and store it.

        The compute function runs outside the lock. If it raises,
        nothing is stored.
        """
        with self._lock:
            if key in self._store:
                self._logger.debug("Cache hit", extra={"key": key})
                return self._store[key]

        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()
        self._set(key, computed)
        return computed

    def clear(self) -> int:
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

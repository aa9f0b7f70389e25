"""In-memory response cache with TTL expiry and LRU eviction."""

import time
from collections import OrderedDict
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class TTLCache(Generic[T]):
    """Small in-process cache keyed by string, expiring entries after a TTL."""

    def __init__(
        self,
        ttl_seconds: int,
        max_size: int,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl_seconds = ttl_seconds
        self._max_size = max_size
        self._clock = clock
        self._store: OrderedDict[str, tuple[float, T]] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._store)

    def get(self, key: str) -> T | None:
        """Return the value if present and fresh, else None."""
        entry = self._store.get(key)
        if entry is None:
            self.misses += 1
            return None

        stored_at, value = entry
        if self._clock() - stored_at > self._ttl_seconds:
            self._store.pop(key, None)
            self.misses += 1
            return None

        self._store.move_to_end(key)
        self.hits += 1
        return value

    def set(self, key: str, value: T) -> None:
        """Store a value, evicting the least recently used entries past max_size."""
        self._store[key] = (self._clock(), value)
        self._store.move_to_end(key)
        while len(self._store) > self._max_size:
            self._store.popitem(last=False)

    def clear(self) -> None:
        self._store.clear()
        self.hits = 0
        self.misses = 0

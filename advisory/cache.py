from __future__ import annotations

import time
from threading import Lock
from typing import Any, Dict, Tuple


class TTLCache:
    """A lightweight thread-safe TTL cache with the Django cache call shape.

    Expired entries are swept on every write and the oldest entries are
    evicted once ``max_entries`` is reached, so keys that are never read
    again do not accumulate.
    """

    DEFAULT_MAX_ENTRIES = 1024

    def __init__(self, time_func=time.monotonic, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._time_func = time_func
        self._max_entries = max_entries
        self._storage: Dict[str, Tuple[float, Any]] = {}
        self._lock = Lock()

    def get(self, key: str) -> Any:
        with self._lock:
            item = self._storage.get(key)
            if not item:
                return None
            expires_at, value = item
            if expires_at < self._time_func():
                self._storage.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any, ttl: float) -> None:
        with self._lock:
            now = self._time_func()
            self._sweep(now)
            # re-insert so dict order tracks write age
            self._storage.pop(key, None)
            while len(self._storage) >= self._max_entries:
                del self._storage[next(iter(self._storage))]
            self._storage[key] = (now + ttl, value)

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()

    def _sweep(self, now: float) -> None:
        expired = [key for key, (expires_at, _) in self._storage.items() if expires_at < now]
        for key in expired:
            del self._storage[key]

    def __len__(self) -> int:
        with self._lock:
            return len(self._storage)


class NullCache:
    """Cache that never stores anything; used to bypass caching."""

    def get(self, key: str) -> Any:
        return None

    def set(self, key: str, value: Any, ttl: float) -> None:
        return None

    def clear(self) -> None:
        return None


__all__ = ["NullCache", "TTLCache"]

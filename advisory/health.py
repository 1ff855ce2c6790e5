"""In-memory health counters for the admin endpoint.

Counters live in process memory only. They make provider outages and
translation degradation visible without touching the advisory results.
"""
from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Dict


@dataclass(frozen=True)
class CacheStats:
    """Simple container for cache related counters."""

    hits: int = 0
    misses: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"hits": self.hits, "misses": self.misses}


class HealthRegistry:
    """Stores provider error counters, translation failures and cache stats."""

    def __init__(self) -> None:
        self._provider_errors: Dict[str, int] = {}
        self._translation_failures: Dict[str, int] = {}
        self._cache_stats = CacheStats()
        self._lock = Lock()

    # -- Provider errors ----------------------------------------------------
    def record_provider_error(self, provider: str, increment: int = 1) -> None:
        if not provider:
            raise ValueError("provider must be provided")
        if increment <= 0:
            raise ValueError("increment must be positive")
        with self._lock:
            self._provider_errors[provider] = self._provider_errors.get(provider, 0) + increment

    # -- Translation failures -----------------------------------------------
    def record_translation_failure(self, language: str) -> None:
        with self._lock:
            self._translation_failures[language] = self._translation_failures.get(language, 0) + 1

    # -- Cache stats --------------------------------------------------------
    def record_cache_lookup(self, hit: bool) -> None:
        with self._lock:
            if hit:
                self._cache_stats = CacheStats(self._cache_stats.hits + 1, self._cache_stats.misses)
            else:
                self._cache_stats = CacheStats(self._cache_stats.hits, self._cache_stats.misses + 1)

    # -- Snapshot -----------------------------------------------------------
    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            providers = dict(self._provider_errors)
            translations = dict(self._translation_failures)
            cache = self._cache_stats.as_dict()
        return {"providers": providers, "translations": translations, "cache": cache}

    def reset(self) -> None:
        with self._lock:
            self._provider_errors.clear()
            self._translation_failures.clear()
            self._cache_stats = CacheStats()


default_registry = HealthRegistry()


__all__ = ["CacheStats", "HealthRegistry", "default_registry"]

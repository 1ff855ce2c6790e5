from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Union

from ..cache import TTLCache
from ..districts import normalize_district
from ..entities import NotFound, WeatherObservation
from ..errors import SourceUnavailable
from ..health import HealthRegistry, default_registry
from ..providers.base import ProviderError, QuotaExceeded, WeatherSource


class WeatherSourceAdapter:
    """Resolve a district to a weather observation through a provider chain."""

    DEFAULT_TTL = 30 * 60

    def __init__(
        self,
        providers: Iterable[WeatherSource],
        *,
        cache: Optional[Any] = None,
        ttl: Optional[int] = None,
        health: Optional[HealthRegistry] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.providers: List[WeatherSource] = list(providers)
        if not self.providers:
            raise ValueError("at least one weather provider is required")
        self.cache = cache if cache is not None else TTLCache()
        self.ttl = self.DEFAULT_TTL if ttl is None else ttl
        self.health = health or default_registry
        self._log = logger or logging.getLogger(self.__class__.__name__)

    # Public API ---------------------------------------------------------
    def fetch_observation(self, district: str) -> Union[WeatherObservation, NotFound]:
        normalized = normalize_district(district)
        cache_key = self._cache_key(normalized)
        cached = self.cache.get(cache_key)
        self.health.record_cache_lookup(cached is not None)
        if cached is not None:
            self._log.debug("Weather cache hit for %s", normalized)
            return cached

        result = self._fetch_with_fallback(normalized)
        if result is None:
            return NotFound(district=district)
        self.cache.set(cache_key, result, self.ttl)
        return result

    # Helpers ------------------------------------------------------------
    def _fetch_with_fallback(self, district: str) -> Optional[WeatherObservation]:
        for provider in self.providers:
            name = getattr(provider, "name", provider.__class__.__name__)
            try:
                return provider.get(district)
            except QuotaExceeded:
                self._log.warning("Provider %s quota exceeded", name)
                self.health.record_provider_error(name)
                continue
            except ProviderError as exc:
                self._log.error("Provider %s failed: %s", name, exc)
                self.health.record_provider_error(name)
                continue
        self._log.error("All weather providers failed for %s", district)
        raise SourceUnavailable(district, "all weather providers failed")

    def _cache_key(self, district: str) -> str:
        return f"weather:district:{district.replace(' ', '_')}"


__all__ = ["WeatherSourceAdapter"]

"""The advisory pipeline: weather lookup, rule evaluation, localization."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, List, Optional

from ..cache import NullCache, TTLCache
from ..config import AdvisoryConfig
from ..engine import AdvisoryEngine
from ..entities import AdvisoryResult, NotFound
from ..errors import DataNotFound
from ..health import HealthRegistry, default_registry
from ..localization import Language, Localizer
from ..providers.base import RequestConfig, WeatherSource
from ..providers.openmeteo import OpenMeteoProvider
from ..providers.openweather import OpenWeatherProvider
from ..providers.static import is_stub_district, stub_source
from ..translation import GoogleTranslateClient
from .weather import WeatherSourceAdapter


logger = logging.getLogger(__name__)


class AdvisoryPipeline:
    """Turn a district name into a localized, severity-ordered advisory."""

    def __init__(
        self,
        weather: WeatherSourceAdapter,
        engine: AdvisoryEngine,
        localizer: Localizer,
    ) -> None:
        self.weather = weather
        self.engine = engine
        self.localizer = localizer

    def get_advisory(self, district: str, language: Optional[str] = None) -> AdvisoryResult:
        target = Language.parse(language)
        observation = self.weather.fetch_observation(district)
        if isinstance(observation, NotFound):
            logger.info("No weather data for district %r", observation.district)
            raise DataNotFound(observation.district)

        items = self.engine.evaluate(observation)
        localized = self.localizer.localize(items, target)
        return AdvisoryResult(
            district=observation.district,
            observation=observation,
            items=tuple(localized),
            generated_at=datetime.now(tz=timezone.utc),
            language=target.value,
        )


def build_providers(config: AdvisoryConfig) -> List[WeatherSource]:
    request_config = RequestConfig(timeout=config.weather_timeout)
    providers: List[WeatherSource] = [
        OpenMeteoProvider(
            base_url=config.open_meteo_url,
            rainfall_window_days=config.rainfall_window_days,
            request_config=request_config,
        )
    ]
    if config.openweather_api_key:
        providers.append(
            OpenWeatherProvider(
                api_key=config.openweather_api_key,
                base_url=config.openweather_url,
                request_config=request_config,
            )
        )
    return providers


def build_pipeline(
    config: Optional[AdvisoryConfig] = None,
    *,
    cache: Optional[Any] = None,
    health: Optional[HealthRegistry] = None,
) -> AdvisoryPipeline:
    config = config or AdvisoryConfig.from_env()
    health = health or default_registry
    weather = WeatherSourceAdapter(
        build_providers(config),
        cache=cache if cache is not None else TTLCache(),
        ttl=config.cache_ttl,
        health=health,
    )
    return AdvisoryPipeline(weather, AdvisoryEngine(), build_localizer(config, health))


def build_stub_pipeline(
    config: Optional[AdvisoryConfig] = None,
    *,
    health: Optional[HealthRegistry] = None,
) -> AdvisoryPipeline:
    """Pipeline for the offline ``test`` district; translation still uses the live client."""
    config = config or AdvisoryConfig.from_env()
    health = health or default_registry
    weather = WeatherSourceAdapter([stub_source()], cache=NullCache(), health=health)
    return AdvisoryPipeline(weather, AdvisoryEngine(), build_localizer(config, health))


def build_localizer(config: AdvisoryConfig, health: HealthRegistry) -> Localizer:
    translator = GoogleTranslateClient(url=config.translate_url, timeout=config.translation_timeout)
    return Localizer(
        translator,
        timeout=config.translation_timeout,
        max_workers=config.translation_max_workers,
        health=health,
    )


@lru_cache(maxsize=1)
def default_pipeline() -> AdvisoryPipeline:
    return build_pipeline()


def get_advisory(district: str, language: Optional[str] = None) -> AdvisoryResult:
    """Module-level entry point using the environment-configured pipeline."""
    pipeline = build_stub_pipeline() if is_stub_district(district) else default_pipeline()
    return pipeline.get_advisory(district, language)


__all__ = [
    "AdvisoryPipeline",
    "build_localizer",
    "build_pipeline",
    "build_providers",
    "build_stub_pipeline",
    "default_pipeline",
    "get_advisory",
]

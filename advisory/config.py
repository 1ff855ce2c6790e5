"""Runtime settings for the advisory pipeline, read from the environment."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_float(name: str, default: float) -> float:
    return float(os.getenv(name, str(default)))


def _env_int(name: str, default: int) -> int:
    return int(os.getenv(name, str(default)))


@dataclass
class AdvisoryConfig:
    open_meteo_url: str = field(
        default_factory=lambda: os.getenv("OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")
    )
    openweather_url: str = field(
        default_factory=lambda: os.getenv(
            "OPENWEATHER_URL", "https://api.openweathermap.org/data/2.5/weather"
        )
    )
    openweather_api_key: Optional[str] = field(default_factory=lambda: os.getenv("OPENWEATHER_API_KEY"))
    translate_url: str = field(
        default_factory=lambda: os.getenv(
            "TRANSLATE_URL", "https://translate.googleapis.com/translate_a/single"
        )
    )
    weather_timeout: float = field(default_factory=lambda: _env_float("WEATHER_TIMEOUT", 5.0))
    translation_timeout: float = field(default_factory=lambda: _env_float("TRANSLATION_TIMEOUT", 5.0))
    cache_ttl: int = field(default_factory=lambda: _env_int("WEATHER_CACHE_TIMEOUT", 30 * 60))
    rainfall_window_days: int = field(default_factory=lambda: _env_int("RAINFALL_WINDOW_DAYS", 3))
    translation_max_workers: int = field(default_factory=lambda: _env_int("TRANSLATION_MAX_WORKERS", 4))

    @classmethod
    def from_env(cls) -> "AdvisoryConfig":
        config = cls()
        if config.weather_timeout <= 0 or config.translation_timeout <= 0:
            raise ValueError("timeouts must be positive")
        if config.rainfall_window_days < 1:
            raise ValueError("RAINFALL_WINDOW_DAYS must be at least 1")
        if config.translation_max_workers < 1:
            raise ValueError("TRANSLATION_MAX_WORKERS must be at least 1")
        return config


__all__ = ["AdvisoryConfig"]

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional

from .base import ProviderError, WeatherProvider, safe_float
from ..districts import coordinates_for, display_name
from ..entities import WeatherObservation


class OpenMeteoProvider(WeatherProvider):
    """Current conditions plus rainfall summed over the last few days.

    ``past_days=N`` with ``forecast_days=1`` yields N + 1 daily totals, the
    last being today's forecast. Only the N observed days are summed.
    """

    name = "open-meteo"
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, rainfall_window_days: int = 3, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self.rainfall_window_days = rainfall_window_days
        self._log = logging.getLogger(self.__class__.__name__)

    def get(self, district: str) -> Optional[WeatherObservation]:
        coords = coordinates_for(district)
        if coords is None:
            self._log.info("No coordinates known for district %s", district)
            return None
        latitude, longitude = coords
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ["temperature_2m", "relative_humidity_2m", "wind_speed_10m"],
            "daily": ["precipitation_sum"],
            "past_days": self.rainfall_window_days,
            "forecast_days": 1,
            "wind_speed_unit": "kmh",
            "timezone": "UTC",
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        current = self._section(data, "current")
        daily = self._section(data, "daily")
        observed_at = self._parse_time(current.get("time"))

        temperature = safe_float(current.get("temperature_2m"))
        humidity = safe_float(current.get("relative_humidity_2m"))
        wind = safe_float(current.get("wind_speed_10m"))
        rainfall = _sum_present(self._observed_days(daily.get("precipitation_sum")))
        if temperature is None or humidity is None or wind is None or rainfall is None:
            self._log.warning("Incomplete reading for %s: %s", district, current)
            return None
        try:
            return WeatherObservation(
                district=display_name(district),
                temperature_c=temperature,
                humidity_pct=humidity,
                rainfall_mm=round(rainfall, 1),
                wind_speed_kph=wind,
                observed_at=observed_at,
                source=self.name,
            )
        except ValueError as exc:
            self._log.warning("Unusable reading for %s: %s", district, exc)
            return None

    def _observed_days(self, values: object) -> List[object]:
        if values is None:
            return []
        if not isinstance(values, list):
            self._log.error("precipitation_sum is not a list: %r", values)
            raise ProviderError("unexpected payload")
        return values[: self.rainfall_window_days]

    def _parse_time(self, value: object) -> datetime:
        if not value:
            return datetime.now(tz=timezone.utc)
        if not isinstance(value, str):
            self._log.error("current.time is not a string: %r", value)
            raise ProviderError("unexpected payload")
        if value.endswith("Z"):
            value = value[:-1]
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as exc:
            raise ProviderError("unexpected payload") from exc
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed


def _sum_present(values: List[object]) -> Optional[float]:
    filtered = [v for v in (safe_float(value) for value in values) if v is not None]
    if not filtered:
        return None
    return sum(filtered)


__all__ = ["OpenMeteoProvider"]

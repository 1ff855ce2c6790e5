"""OpenWeather weather provider."""
from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Optional

from .base import ProviderError, WeatherProvider, safe_float
from ..districts import coordinates_for, display_name
from ..entities import WeatherObservation


logger = logging.getLogger(__name__)


def _ms_to_kph(value: float) -> float:
    return round(value * 3.6, 1)


class OpenWeatherProvider(WeatherProvider):
    """Integration with the OpenWeather current weather endpoint.

    The endpoint only reports rain for the last one or three hours, so the
    rainfall window is much shorter than Open-Meteo's.
    """

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, *, api_key: str, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url or self.base_url

    def get(self, district: str) -> Optional[WeatherObservation]:  # noqa: D401
        """Return weather observations from OpenWeather."""
        coords = coordinates_for(district)
        if coords is None:
            return None
        latitude, longitude = coords
        params = {"lat": latitude, "lon": longitude, "appid": self.api_key, "units": "metric"}
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        main = self._section(data, "main")
        wind = self._section(data, "wind")
        rain = self._section(data, "rain")
        observed_at = self._parse_timestamp(data.get("dt"))

        temperature = safe_float(main.get("temp"))
        humidity = safe_float(main.get("humidity"))
        wind_speed = safe_float(wind.get("speed"))
        if temperature is None or humidity is None or wind_speed is None:
            logger.warning("OpenWeather returned an incomplete reading for %s", district)
            return None
        precipitation = safe_float(rain.get("3h")) or safe_float(rain.get("1h")) or 0.0

        try:
            return WeatherObservation(
                district=display_name(district),
                temperature_c=temperature,
                humidity_pct=humidity,
                rainfall_mm=precipitation,
                wind_speed_kph=_ms_to_kph(wind_speed),
                observed_at=observed_at,
                source=self.name,
            )
        except ValueError as exc:
            logger.warning("OpenWeather reading for %s rejected: %s", district, exc)
            return None

    def _parse_timestamp(self, value: object) -> datetime:
        if value is None:
            return datetime.now(tz=timezone.utc)
        seconds = safe_float(value)
        if seconds is None or isinstance(value, bool):
            logger.error("OpenWeather dt is not a timestamp: %r", value)
            raise ProviderError("unexpected payload")
        try:
            return datetime.fromtimestamp(int(seconds), tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise ProviderError("unexpected payload") from exc


__all__ = ["OpenWeatherProvider"]

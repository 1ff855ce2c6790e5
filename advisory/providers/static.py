"""In-memory weather source for local development and tests."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Mapping, Optional

from ..districts import normalize_district
from ..entities import WeatherObservation

STUB_DISTRICT = "test"


class StaticWeatherSource:
    """Serve pre-recorded readings keyed by district name."""

    name = "static"

    def __init__(self, readings: Optional[Mapping[str, WeatherObservation]] = None) -> None:
        self._readings: Dict[str, WeatherObservation] = {}
        for district, observation in (readings or {}).items():
            self.add(district, observation)
        self.calls = 0

    def add(self, district: str, observation: WeatherObservation) -> None:
        self._readings[normalize_district(district)] = observation

    def get(self, district: str) -> Optional[WeatherObservation]:
        self.calls += 1
        return self._readings.get(district)


def is_stub_district(district: object) -> bool:
    return isinstance(district, str) and bool(district.strip()) and normalize_district(district) == STUB_DISTRICT


def stub_source(now: Optional[datetime] = None) -> StaticWeatherSource:
    """A source that only knows the ``test`` district: a hot, dry reading."""
    observation = WeatherObservation(
        district="Test",
        temperature_c=33.0,
        humidity_pct=35.0,
        rainfall_mm=2.0,
        wind_speed_kph=12.0,
        observed_at=now or datetime.now(tz=timezone.utc),
        source="stub",
    )
    return StaticWeatherSource({STUB_DISTRICT: observation})


__all__ = ["STUB_DISTRICT", "StaticWeatherSource", "is_stub_district", "stub_source"]

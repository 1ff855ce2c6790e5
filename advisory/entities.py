from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple


class Category(str, enum.Enum):
    """Advisory categories in their fixed presentation order."""

    IRRIGATION = "irrigation"
    PEST_RISK = "pest-risk"
    PLANTING_WINDOW = "planting-window"
    HARVEST_TIMING = "harvest-timing"
    GENERAL = "general"

    @property
    def order(self) -> int:
        return _CATEGORY_ORDER.index(self)


_CATEGORY_ORDER = list(Category)


class Severity(str, enum.Enum):
    """Urgency of an advisory, ``info`` being the lowest."""

    INFO = "info"
    ADVISORY = "advisory"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.INFO: 0,
    Severity.ADVISORY: 1,
    Severity.WARNING: 2,
    Severity.CRITICAL: 3,
}


@dataclass(frozen=True)
class WeatherObservation:
    """Normalized point-in-time weather reading for a district.

    Units are fixed so providers stay interchangeable:
    - temperature in Celsius
    - relative humidity in percent (0-100)
    - rainfall in millimetres accumulated over the provider's recent window
    - wind speed in kilometres per hour
    """

    district: str
    temperature_c: float
    humidity_pct: float
    rainfall_mm: float
    wind_speed_kph: float
    observed_at: datetime
    source: str = "unknown"

    def __post_init__(self) -> None:
        for name in ("temperature_c", "humidity_pct", "rainfall_mm", "wind_speed_kph"):
            if not math.isfinite(getattr(self, name)):
                raise ValueError(f"{name} must be a finite number: {getattr(self, name)}")
        if not 0.0 <= self.humidity_pct <= 100.0:
            raise ValueError(f"humidity_pct out of range: {self.humidity_pct}")
        if self.rainfall_mm < 0:
            raise ValueError(f"rainfall_mm must be non-negative: {self.rainfall_mm}")
        if self.wind_speed_kph < 0:
            raise ValueError(f"wind_speed_kph must be non-negative: {self.wind_speed_kph}")
        if self.observed_at.tzinfo is None:
            raise ValueError("observed_at must be timezone aware")

    def template_fields(self) -> dict:
        return {
            "district": self.district,
            "temperature_c": self.temperature_c,
            "humidity_pct": self.humidity_pct,
            "rainfall_mm": self.rainfall_mm,
            "wind_speed_kph": self.wind_speed_kph,
        }


@dataclass(frozen=True)
class NotFound:
    """No weather data exists for the requested district."""

    district: str


@dataclass(frozen=True)
class AdvisoryItem:
    rule_id: str
    category: Category
    severity: Severity
    message: str
    district: str
    generated_at: datetime
    translated_message: Optional[str] = None
    translation_degraded: bool = False

    def sort_key(self) -> Tuple[int, int, str]:
        return (-self.severity.rank, self.category.order, self.rule_id)


@dataclass(frozen=True)
class AdvisoryResult:
    district: str
    observation: WeatherObservation
    items: Tuple[AdvisoryItem, ...]
    generated_at: datetime
    language: str = "en"

    @property
    def translation_degraded(self) -> bool:
        return any(item.translation_degraded for item in self.items)


__all__ = [
    "AdvisoryItem",
    "AdvisoryResult",
    "Category",
    "NotFound",
    "Severity",
    "WeatherObservation",
]

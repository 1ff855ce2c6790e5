"""JSON-ready payloads for advisory results."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from .entities import AdvisoryItem, AdvisoryResult, WeatherObservation


def format_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def observation_to_dict(observation: WeatherObservation) -> Dict[str, Any]:
    return {
        "district": observation.district,
        "temperature_c": observation.temperature_c,
        "humidity_pct": observation.humidity_pct,
        "rainfall_mm": observation.rainfall_mm,
        "wind_speed_kph": observation.wind_speed_kph,
        "observed_at": format_timestamp(observation.observed_at),
        "source": observation.source,
    }


def item_to_dict(item: AdvisoryItem) -> Dict[str, Any]:
    return {
        "rule_id": item.rule_id,
        "category": item.category.value,
        "severity": item.severity.value,
        "message": item.message,
        "translated_message": item.translated_message,
        "translation_degraded": item.translation_degraded,
        "district": item.district,
        "generated_at": format_timestamp(item.generated_at),
    }


def result_to_payload(result: AdvisoryResult) -> Dict[str, Any]:
    return {
        "district": result.district,
        "weather": observation_to_dict(result.observation),
        "advisory": [item_to_dict(item) for item in result.items],
        "language": result.language,
        "translation_degraded": result.translation_degraded,
        "timestamp": format_timestamp(result.generated_at),
    }


__all__ = ["format_timestamp", "item_to_dict", "observation_to_dict", "result_to_payload"]

"""Declarative advisory rule table.

Each rule pairs a pure predicate over a :class:`WeatherObservation` with its
category, severity and an English message template. Rules sharing a category
are written to be mutually exclusive; the engine only orders them.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

from .entities import Category, Severity, WeatherObservation

RULESET_VERSION = "2024.06"

Predicate = Callable[[WeatherObservation], bool]


@dataclass(frozen=True)
class AdvisoryRule:
    id: str
    predicate: Predicate
    category: Category
    severity: Severity
    message_template: str

    def matches(self, observation: WeatherObservation) -> bool:
        return bool(self.predicate(observation))

    def render(self, observation: WeatherObservation) -> str:
        return self.message_template.format(**observation.template_fields())


def _is_drought(obs: WeatherObservation) -> bool:
    return obs.rainfall_mm < 5 and obs.humidity_pct < 40


DEFAULT_RULES: Tuple[AdvisoryRule, ...] = (
    # irrigation: rainfall bands do not overlap
    AdvisoryRule(
        id="irrigation.drought-stress",
        predicate=_is_drought,
        category=Category.IRRIGATION,
        severity=Severity.WARNING,
        message_template=(
            "Low rainfall ({rainfall_mm:.0f} mm) and dry air ({humidity_pct:.0f}% humidity) in {district}: "
            "increase irrigation frequency and water in the early morning."
        ),
    ),
    AdvisoryRule(
        id="irrigation.low-rainfall",
        predicate=lambda obs: obs.rainfall_mm < 20 and not _is_drought(obs),
        category=Category.IRRIGATION,
        severity=Severity.ADVISORY,
        message_template=(
            "Low rainfall ({rainfall_mm:.0f} mm) in {district}: follow an irrigation schedule "
            "and mulch to retain soil moisture."
        ),
    ),
    AdvisoryRule(
        id="irrigation.pause-after-rain",
        predicate=lambda obs: obs.rainfall_mm >= 50,
        category=Category.IRRIGATION,
        severity=Severity.INFO,
        message_template=(
            "{rainfall_mm:.0f} mm of recent rain in {district}: pause irrigation until the topsoil dries."
        ),
    ),
    # pest-risk
    AdvisoryRule(
        id="pest-risk.fungal",
        predicate=lambda obs: obs.humidity_pct >= 85 and 20 <= obs.temperature_c <= 32,
        category=Category.PEST_RISK,
        severity=Severity.ADVISORY,
        message_template=(
            "High humidity ({humidity_pct:.0f}%) at {temperature_c:.0f}°C favours fungal disease "
            "and pest pressure: inspect leaves and improve air flow between plants."
        ),
    ),
    AdvisoryRule(
        id="pest-risk.sucking-pests",
        predicate=lambda obs: obs.temperature_c >= 30 and obs.humidity_pct < 50,
        category=Category.PEST_RISK,
        severity=Severity.INFO,
        message_template=(
            "Hot, dry conditions ({temperature_c:.0f}°C, {humidity_pct:.0f}% humidity) favour mites "
            "and thrips: check the underside of leaves."
        ),
    ),
    # planting-window: temperature bands do not overlap
    AdvisoryRule(
        id="planting-window.frost",
        predicate=lambda obs: obs.temperature_c <= 2,
        category=Category.PLANTING_WINDOW,
        severity=Severity.CRITICAL,
        message_template=(
            "Frost risk at {temperature_c:.0f}°C in {district}: do not transplant and cover young seedlings."
        ),
    ),
    AdvisoryRule(
        id="planting-window.cold-delay",
        predicate=lambda obs: 2 < obs.temperature_c < 15,
        category=Category.PLANTING_WINDOW,
        severity=Severity.ADVISORY,
        message_template=(
            "Cool weather ({temperature_c:.0f}°C): delay transplanting until temperatures rise."
        ),
    ),
    AdvisoryRule(
        id="planting-window.favourable",
        predicate=lambda obs: (
            18 <= obs.temperature_c <= 32
            and 40 <= obs.humidity_pct <= 80
            and 20 <= obs.rainfall_mm < 50
            and obs.wind_speed_kph < 20
        ),
        category=Category.PLANTING_WINDOW,
        severity=Severity.INFO,
        message_template="Favourable conditions for sowing and field work in {district}.",
    ),
    # harvest-timing: rainfall bands do not overlap
    AdvisoryRule(
        id="harvest-timing.heavy-rain",
        predicate=lambda obs: obs.rainfall_mm >= 100,
        category=Category.HARVEST_TIMING,
        severity=Severity.WARNING,
        message_template=(
            "Heavy rain ({rainfall_mm:.0f} mm) in {district}: harvest mature crops early "
            "and clear field drainage to avoid waterlogging."
        ),
    ),
    AdvisoryRule(
        id="harvest-timing.dry-spell",
        predicate=lambda obs: obs.rainfall_mm < 5 and obs.humidity_pct < 60 and obs.wind_speed_kph < 30,
        category=Category.HARVEST_TIMING,
        severity=Severity.INFO,
        message_template="Dry, calm spell: a good window to harvest and sun-dry produce.",
    ),
    # general: temperature and wind bands do not overlap
    AdvisoryRule(
        id="general.heat-stress",
        predicate=lambda obs: 35 < obs.temperature_c < 42,
        category=Category.GENERAL,
        severity=Severity.WARNING,
        message_template=(
            "Heat stress risk at {temperature_c:.0f}°C: provide shade to young plants "
            "and avoid field work at midday."
        ),
    ),
    AdvisoryRule(
        id="general.extreme-heat",
        predicate=lambda obs: obs.temperature_c >= 42,
        category=Category.GENERAL,
        severity=Severity.CRITICAL,
        message_template=(
            "Extreme heat ({temperature_c:.0f}°C) in {district}: irrigate in the evening, "
            "shade livestock and stop midday field work."
        ),
    ),
    AdvisoryRule(
        id="general.high-wind",
        predicate=lambda obs: 40 <= obs.wind_speed_kph < 60,
        category=Category.GENERAL,
        severity=Severity.WARNING,
        message_template=(
            "Strong winds ({wind_speed_kph:.0f} km/h): stake tall plants and postpone spraying."
        ),
    ),
    AdvisoryRule(
        id="general.storm-wind",
        predicate=lambda obs: obs.wind_speed_kph >= 60,
        category=Category.GENERAL,
        severity=Severity.CRITICAL,
        message_template=(
            "Storm-force winds ({wind_speed_kph:.0f} km/h) in {district}: secure structures "
            "and stay out of the fields."
        ),
    ),
)


__all__ = ["AdvisoryRule", "DEFAULT_RULES", "RULESET_VERSION"]

from __future__ import annotations

import pytest

from advisory.entities import Category, Severity
from advisory.rules import DEFAULT_RULES

from factories import make_observation


RULES = {rule.id: rule for rule in DEFAULT_RULES}


def fired(**readings) -> set:
    observation = make_observation(**readings)
    return {rule.id for rule in DEFAULT_RULES if rule.matches(observation)}


def test_rule_ids_are_unique() -> None:
    assert len(RULES) == len(DEFAULT_RULES)


def test_every_template_renders() -> None:
    observation = make_observation()
    for rule in DEFAULT_RULES:
        assert rule.render(observation)


@pytest.mark.parametrize(
    "readings, expected",
    [
        ({"rainfall_mm": 0, "humidity_pct": 20}, "irrigation.drought-stress"),
        ({"rainfall_mm": 0, "humidity_pct": 70}, "irrigation.low-rainfall"),
        ({"rainfall_mm": 12, "humidity_pct": 20}, "irrigation.low-rainfall"),
        ({"rainfall_mm": 50}, "irrigation.pause-after-rain"),
    ],
)
def test_irrigation_bands(readings, expected) -> None:
    irrigation = {rule_id for rule_id in fired(**readings) if rule_id.startswith("irrigation.")}
    assert irrigation == {expected}


def test_no_irrigation_rule_for_moderate_rain() -> None:
    assert not {rule_id for rule_id in fired(rainfall_mm=30) if rule_id.startswith("irrigation.")}


def test_fungal_risk_needs_humid_warmth() -> None:
    assert "pest-risk.fungal" in fired(humidity_pct=90, temperature_c=25)
    assert "pest-risk.fungal" not in fired(humidity_pct=90, temperature_c=12)
    assert "pest-risk.fungal" not in fired(humidity_pct=70, temperature_c=25)


@pytest.mark.parametrize(
    "temperature, expected",
    [(-1.0, "planting-window.frost"), (2.0, "planting-window.frost"), (9.0, "planting-window.cold-delay")],
)
def test_cold_planting_bands(temperature, expected) -> None:
    planting = {rule_id for rule_id in fired(temperature_c=temperature) if rule_id.startswith("planting-window.")}
    assert planting == {expected}


def test_favourable_window() -> None:
    assert "planting-window.favourable" in fired(temperature_c=26, humidity_pct=60, rainfall_mm=30, wind_speed_kph=10)
    assert "planting-window.favourable" not in fired(temperature_c=26, humidity_pct=60, rainfall_mm=30, wind_speed_kph=25)


def test_heat_and_wind_bands() -> None:
    assert "general.heat-stress" in fired(temperature_c=38)
    assert "general.extreme-heat" in fired(temperature_c=43)
    assert "general.heat-stress" not in fired(temperature_c=43)
    assert "general.high-wind" in fired(wind_speed_kph=45)
    assert "general.storm-wind" in fired(wind_speed_kph=70)
    assert "general.high-wind" not in fired(wind_speed_kph=70)


def test_heavy_rain_harvest_warning() -> None:
    rule = RULES["harvest-timing.heavy-rain"]
    assert rule.category is Category.HARVEST_TIMING
    assert rule.severity is Severity.WARNING
    message = rule.render(make_observation(rainfall_mm=120, district="Udupi"))
    assert "120 mm" in message
    assert "Udupi" in message


def test_drought_message_mentions_rainfall() -> None:
    message = RULES["irrigation.drought-stress"].render(make_observation(rainfall_mm=0, humidity_pct=20))
    assert message.startswith("Low rainfall (0 mm)")

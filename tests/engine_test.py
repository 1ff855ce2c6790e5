from __future__ import annotations

import pytest

from advisory.engine import AdvisoryEngine
from advisory.entities import Category, Severity
from advisory.rules import AdvisoryRule

from factories import FIXED_NOW, fixed_clock, make_observation


def always(_observation) -> bool:
    return True


def make_rule(rule_id: str, category: Category, severity: Severity) -> AdvisoryRule:
    return AdvisoryRule(
        id=rule_id,
        predicate=always,
        category=category,
        severity=severity,
        message_template=f"{rule_id} for {{district}}",
    )


def test_drought_observation_yields_irrigation_warning() -> None:
    engine = AdvisoryEngine(clock=fixed_clock)

    items = engine.evaluate(make_observation(rainfall_mm=0, humidity_pct=20, temperature_c=38))

    irrigation = [item for item in items if item.category is Category.IRRIGATION]
    assert len(irrigation) == 1
    assert irrigation[0].severity is Severity.WARNING
    assert "low rainfall" in irrigation[0].message.lower()


def test_wet_observation_orders_pest_risk_before_irrigation_pause() -> None:
    engine = AdvisoryEngine(clock=fixed_clock)

    items = engine.evaluate(make_observation(rainfall_mm=150, humidity_pct=95, temperature_c=24))
    ids = [item.rule_id for item in items]

    assert "pest-risk.fungal" in ids
    assert "irrigation.pause-after-rain" in ids
    assert ids.index("pest-risk.fungal") < ids.index("irrigation.pause-after-rain")
    by_id = {item.rule_id: item for item in items}
    assert by_id["pest-risk.fungal"].severity is Severity.ADVISORY
    assert by_id["irrigation.pause-after-rain"].severity is Severity.INFO


def test_evaluate_is_deterministic() -> None:
    engine = AdvisoryEngine(clock=fixed_clock)
    observation = make_observation(rainfall_mm=0, humidity_pct=20, temperature_c=45, wind_speed_kph=65)

    first = engine.evaluate(observation)
    second = engine.evaluate(observation)

    assert first == second
    assert [item.rule_id for item in first] == [item.rule_id for item in second]


@pytest.mark.parametrize(
    "readings",
    [
        {"rainfall_mm": 0, "humidity_pct": 20, "temperature_c": 45, "wind_speed_kph": 65},
        {"rainfall_mm": 150, "humidity_pct": 95, "temperature_c": 24, "wind_speed_kph": 45},
        {"rainfall_mm": 0, "humidity_pct": 30, "temperature_c": 1, "wind_speed_kph": 5},
    ],
)
def test_severity_never_increases_along_the_result(readings) -> None:
    items = AdvisoryEngine(clock=fixed_clock).evaluate(make_observation(**readings))

    ranks = [item.severity.rank for item in items]
    assert ranks == sorted(ranks, reverse=True)
    assert len({item.rule_id for item in items}) == len(items)


def test_ties_break_on_category_then_rule_id() -> None:
    rules = [
        make_rule("z.general", Category.GENERAL, Severity.WARNING),
        make_rule("b.irrigation", Category.IRRIGATION, Severity.WARNING),
        make_rule("a.irrigation", Category.IRRIGATION, Severity.WARNING),
        make_rule("pest", Category.PEST_RISK, Severity.CRITICAL),
        make_rule("info", Category.IRRIGATION, Severity.INFO),
    ]
    items = AdvisoryEngine(rules, clock=fixed_clock).evaluate(make_observation())

    assert [item.rule_id for item in items] == ["pest", "a.irrigation", "b.irrigation", "z.general", "info"]


def test_items_carry_district_and_clock_time() -> None:
    rules = [make_rule("only", Category.GENERAL, Severity.INFO)]
    (item,) = AdvisoryEngine(rules, clock=fixed_clock).evaluate(make_observation(district="Hassan"))

    assert item.message == "only for Hassan"
    assert item.district == "Hassan"
    assert item.generated_at == FIXED_NOW
    assert item.translated_message is None
    assert item.translation_degraded is False


def test_no_matching_rules_is_an_empty_result() -> None:
    never = AdvisoryRule(
        id="never",
        predicate=lambda obs: False,
        category=Category.GENERAL,
        severity=Severity.CRITICAL,
        message_template="unused",
    )
    assert AdvisoryEngine([never]).evaluate(make_observation()) == []


def test_calm_default_observation_has_no_alerts_above_info() -> None:
    items = AdvisoryEngine(clock=fixed_clock).evaluate(make_observation())
    assert all(item.severity is Severity.INFO for item in items)


def test_duplicate_rule_ids_are_rejected() -> None:
    with pytest.raises(ValueError):
        AdvisoryEngine(
            [
                make_rule("dup", Category.GENERAL, Severity.INFO),
                make_rule("dup", Category.IRRIGATION, Severity.WARNING),
            ]
        )


def test_zero_readings_are_valid_observations() -> None:
    observation = make_observation(rainfall_mm=0, humidity_pct=0, wind_speed_kph=0, temperature_c=0)
    items = AdvisoryEngine(clock=fixed_clock).evaluate(observation)
    assert "planting-window.frost" in {item.rule_id for item in items}


@pytest.mark.parametrize(
    "field, value",
    [("humidity_pct", -1.0), ("humidity_pct", 101.0), ("rainfall_mm", -0.1), ("wind_speed_kph", -3.0)],
)
def test_observation_rejects_out_of_range_readings(field, value) -> None:
    with pytest.raises(ValueError):
        make_observation(**{field: value})

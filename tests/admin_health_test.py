import pytest

from advisory.health import HealthRegistry


@pytest.fixture()
def registry() -> HealthRegistry:
    registry = HealthRegistry()
    registry.record_provider_error("openweather")
    registry.record_provider_error("open-meteo", increment=3)
    registry.record_translation_failure("kn")
    registry.record_cache_lookup(hit=True)
    registry.record_cache_lookup(hit=False)
    registry.record_cache_lookup(hit=False)
    return registry


def test_snapshot_contains_all_counters(registry: HealthRegistry) -> None:
    payload = registry.snapshot()

    assert payload["providers"] == {"open-meteo": 3, "openweather": 1}
    assert payload["translations"] == {"kn": 1}
    assert payload["cache"] == {"hits": 1, "misses": 2}


def test_invalid_provider_counters_are_rejected(registry: HealthRegistry) -> None:
    with pytest.raises(ValueError):
        registry.record_provider_error("")
    with pytest.raises(ValueError):
        registry.record_provider_error("open-meteo", increment=0)


def test_reset_clears_everything(registry: HealthRegistry) -> None:
    registry.reset()
    assert registry.snapshot() == {"providers": {}, "translations": {}, "cache": {"hits": 0, "misses": 0}}

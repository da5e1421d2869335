import pytest

from calidad_aire.models import (
    HIST_DAYS,
    MAX_NAME,
    ZONE_COUNT,
    Pollutant,
    Reading,
    Zone,
    ZoneRegistry,
    default_limits,
)


def test_default_limits_order_and_values():
    limits = default_limits()
    assert [p.name for p in limits] == ["PM", "NO2", "SO2", "CO2"]
    assert [p.limit for p in limits] == [15, 25, 40, 750]
    assert limits[0] == Pollutant("PM", 15)


def test_zone_push_keeps_newest_first():
    zone = Zone("Beijing")
    first = Reading(co2=1.0)
    second = Reading(co2=2.0)
    zone.push(first)
    zone.push(second)
    assert zone.history == [second, first]
    assert zone.days_loaded() == 2


def test_zone_history_is_capped():
    zone = Zone("Tianjin")
    for day in range(HIST_DAYS + 5):
        zone.push(Reading(co2=float(day)))
    assert zone.days_loaded() == HIST_DAYS
    assert zone.history[0].co2 == float(HIST_DAYS + 4)
    assert zone.history[-1].co2 == 5.0


def test_find_or_create_returns_same_zone():
    registry = ZoneRegistry()
    a = registry.find_or_create("Shanghai")
    b = registry.find_or_create("Shanghai")
    assert a is b
    assert len(registry) == 1


def test_registry_full_returns_none():
    registry = ZoneRegistry()
    for i in range(ZONE_COUNT):
        assert registry.find_or_create(f"z{i}") is not None
    assert registry.find_or_create("extra") is None
    assert [z.name for z in registry.named_zones()] == [f"z{i}" for i in range(ZONE_COUNT)]


def test_existing_zone_found_when_full():
    registry = ZoneRegistry()
    for i in range(ZONE_COUNT):
        registry.find_or_create(f"z{i}")
    assert registry.find_or_create("z3").name == "z3"


def test_name_truncated():
    registry = ZoneRegistry()
    zone = registry.find_or_create("x" * 40)
    assert len(zone.name) == MAX_NAME - 1


def test_empty_name_rejected():
    with pytest.raises(ValueError):
        ZoneRegistry().find_or_create("")


def test_named_zones_is_a_copy():
    registry = ZoneRegistry()
    registry.find_or_create("A")
    zones = registry.named_zones()
    zones.clear()
    assert len(registry.named_zones()) == 1
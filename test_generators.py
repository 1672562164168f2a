"""
Test script for the Generator Catalog and Registry.
"""
import asyncio
import re
from datetime import datetime, timezone

import pytest

from src.generators import (
    BUILTIN_GENERATORS,
    EmptyReferenceSetError,
    GeneratorCategory,
    GeneratorKind,
    GeneratorRegistry,
    create_default_registry,
    normalize_generator_name,
)
from src.generators.basic import SEQUENTIAL_NUMBER_GENERATOR


FROZEN_NOON = datetime(2024, 7, 15, 12, 0, tzinfo=timezone.utc)


def generate(registry, name, count, options=None):
    return asyncio.run(registry.get(name).generate(count, options))


def test_default_catalog_contents():
    """Catalog holds every generator kind once, in registration order."""
    registry = create_default_registry(seed=1)

    assert len(registry) == len(GeneratorKind)
    keys = [g.key for g in registry.get_all()]
    assert keys[0] == "uuid"
    assert keys.index("foreignkey") < keys.index("humidity")
    assert len(set(keys)) == len(keys)


def test_lookup_by_display_name_or_key():
    registry = create_default_registry(seed=1)

    by_name = registry.get("Sequential Number")
    assert by_name is not None
    assert registry.get("sequentialnumber") is by_name
    assert registry.get("  SEQUENTIAL   number ") is by_name
    assert registry.get("Celsius String").kind is GeneratorKind.CELSIUS_STRING
    assert registry.get("nope") is None
    assert registry.get(None) is None
    assert "Foreign Key" in registry
    assert registry.is_foreign_key("Foreign Key")
    assert not registry.is_foreign_key("UUID")


def test_normalize_generator_name():
    assert normalize_generator_name("Phone Number") == "phonenumber"
    assert normalize_generator_name("UUID") == "uuid"


def test_sequential_numbers():
    """Sequential Number with start/step yields the arithmetic series as text."""
    registry = create_default_registry(seed=1)

    assert generate(registry, "Sequential Number", 5, {"start_at": 3, "step": 2}) == [
        "3", "5", "7", "9", "11"
    ]
    assert generate(registry, "Sequential Number", 3) == ["1", "2", "3"]


def test_sequential_padding_prefix_suffix():
    registry = create_default_registry(seed=1)
    values = generate(registry, "Sequential Number", 2, {
        "start_at": 7, "pad_to_length": 4, "prefix": "INV-", "suffix": "/A"
    })
    assert values == ["INV-0007/A", "INV-0008/A"]


def test_generate_count_contract():
    """Every generator returns exactly `count` values; zero gives []."""
    registry = create_default_registry(seed=7, clock=lambda: FROZEN_NOON)

    for generator in registry.get_all():
        if generator.is_foreign_key:
            continue
        assert len(asyncio.run(generator.generate(4))) == 4, generator.name
        assert asyncio.run(generator.generate(0)) == []


def test_boolean_weights():
    registry = create_default_registry(seed=3)

    assert generate(registry, "Boolean", 50, {"true_weight": 0}) == [False] * 50
    assert generate(registry, "Boolean", 50, {"true_weight": 1}) == [True] * 50


def test_foreign_key_empty_reference_set():
    registry = create_default_registry(seed=3)

    with pytest.raises(EmptyReferenceSetError):
        generate(registry, "Foreign Key", 5, {"referenced_values": []})


def test_foreign_key_draws_from_reference_set():
    registry = create_default_registry(seed=3)

    values = generate(registry, "Foreign Key", 5, {"referenced_values": ["a", "b"]})
    assert len(values) == 5
    assert set(values) <= {"a", "b"}


def test_option_merging():
    """Unknown keys are ignored and None keeps the default."""
    merged = SEQUENTIAL_NUMBER_GENERATOR.merge_options({"step": 5, "bogus": 1, "start_at": None})
    assert merged["step"] == 5
    assert merged["start_at"] == 1
    assert "bogus" not in merged


def test_unbound_generator_raises():
    with pytest.raises(RuntimeError):
        asyncio.run(SEQUENTIAL_NUMBER_GENERATOR.generate(1))


def test_seeded_registries_are_reproducible():
    first = create_default_registry(seed=42, clock=lambda: FROZEN_NOON)
    second = create_default_registry(seed=42, clock=lambda: FROZEN_NOON)

    for name in ("UUID", "First Name", "Money", "Product Code", "Timestamp"):
        assert generate(first, name, 5) == generate(second, name, 5), name


def test_money_range_and_places():
    registry = create_default_registry(seed=5)
    values = generate(registry, "Money", 100, {"min_amount": 5, "max_amount": 6, "decimal_places": 1})
    assert all(5 <= v <= 6 for v in values)
    assert all(round(v, 1) == v for v in values)


def test_first_name_casing():
    registry = create_default_registry(seed=5)
    assert all(n == n.upper() for n in generate(registry, "First Name", 10, {"casing": "upper"}))
    assert all(n == n.lower() for n in generate(registry, "First Name", 10, {"casing": "lower"}))


def test_product_code_format():
    registry = create_default_registry(seed=5)
    codes = generate(registry, "Product Code", 20, {"format": "AA-99", "prefix": "P"})
    assert all(re.fullmatch(r"P[A-Z]{2}-\d{2}", code) for code in codes)


def test_password_length():
    registry = create_default_registry(seed=5)
    memorable = generate(registry, "Password", 5, {"password_length": 8})
    strong = generate(registry, "Password", 5, {"password_length": 16, "password_memorability": False})

    assert all(len(p) == 8 and p.isalpha() and p.islower() for p in memorable)
    assert all(len(p) == 16 for p in strong)


def test_timestamp_window():
    registry = create_default_registry(seed=5, clock=lambda: FROZEN_NOON)
    values = generate(registry, "Timestamp", 20, {
        "min_date": "2024-01-01T00:00:00Z", "max_date": "2024-01-31T00:00:00Z"
    })

    for value in values:
        assert value.endswith("Z")
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        assert datetime(2024, 1, 1, tzinfo=timezone.utc) <= parsed <= datetime(2024, 1, 31, tzinfo=timezone.utc)


def test_temperature_without_variation_stays_in_range():
    registry = create_default_registry(seed=9, clock=lambda: FROZEN_NOON)
    values = generate(registry, "Temperature", 50, {
        "min_temperature": 0, "max_temperature": 10,
        "include_time_variation": False, "include_seasonal_variation": False,
    })
    assert all(0 <= v <= 10 for v in values)


def test_variation_is_zero_at_peak():
    """At 14:00 in July both temperature sine terms vanish."""
    peak = datetime(2024, 7, 1, 14, 0, tzinfo=timezone.utc)
    varied = create_default_registry(seed=11, clock=lambda: peak)
    flat = create_default_registry(seed=11, clock=lambda: peak)

    with_variation = generate(varied, "Temperature", 10)
    without_variation = generate(flat, "Temperature", 10, {
        "include_time_variation": False, "include_seasonal_variation": False,
    })
    assert with_variation == pytest.approx(without_variation)


def test_humidity_daily_variation_with_frozen_clock():
    """Six hours after the humidity peak the daily term adds its full swing."""
    noon_in_july = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)
    varied = create_default_registry(seed=13, clock=lambda: noon_in_july)
    flat = create_default_registry(seed=13, clock=lambda: noon_in_july)
    options = {"min_humidity": 0, "max_humidity": 100, "include_seasonal_variation": False}

    with_variation = generate(varied, "Humidity", 20, options)
    base = generate(flat, "Humidity", 20, {**options, "include_time_variation": False})

    assert with_variation == pytest.approx([min(b + 10, 100) for b in base])


def test_temperature_strings():
    registry = create_default_registry(seed=9, clock=lambda: FROZEN_NOON)

    celsius = generate(registry, "Celsius String", 5)
    fahrenheit = generate(registry, "Fahrenheit String", 5, {"decimal_places": 2})

    assert all(re.fullmatch(r"-?\d+\.\d°C", v) for v in celsius)
    assert all(re.fullmatch(r"-?\d+\.\d{2}°F", v) for v in fahrenheit)


def test_small_registry():
    registry = GeneratorRegistry([SEQUENTIAL_NUMBER_GENERATOR], seed=1)

    assert len(registry) == 1
    assert registry.get("UUID") is None
    assert registry.get_all()[0].category is GeneratorCategory.NUMBER
    assert len(BUILTIN_GENERATORS) == len(GeneratorKind)

"""
Test script for the Type Compatibility Matcher.
"""
from src.generators import (
    base_type,
    create_default_registry,
    is_compatible,
    normalize_sql_type,
)


def names(generators):
    return [g.name for g in generators]


def test_every_declared_type_matches_its_generator():
    """Each compatible-type entry selects the generator that declares it."""
    registry = create_default_registry(seed=1)

    for generator in registry.get_all():
        for sql_type in generator.compatible_types:
            matched = registry.get_compatible_generators(sql_type)
            assert generator in matched, f"{generator.name} missing for {sql_type}"


def test_unknown_type_returns_full_catalog():
    registry = create_default_registry(seed=1)

    matched = registry.get_compatible_generators("GEOMETRY")
    assert len(matched) == len(registry)
    assert names(matched) == names(registry.get_all())


def test_parameterised_types_match_base_type():
    registry = create_default_registry(seed=1)

    varchar = names(registry.get_compatible_generators("varchar(50)"))
    assert "First Name" in varchar
    assert "Email" in varchar
    assert "Sequential Number" not in varchar

    # "NUMBER(19,4)" entry and "NUMBER(10)" query share the base type
    number = names(registry.get_compatible_generators("NUMBER(10)"))
    assert "Sequential Number" in number
    assert "Money Amount" in number


def test_results_keep_catalog_order():
    registry = create_default_registry(seed=1)
    catalog = names(registry.get_all())

    matched = names(registry.get_compatible_generators("VARCHAR"))
    assert matched == sorted(matched, key=catalog.index)


def test_uuid_types():
    registry = create_default_registry(seed=1)
    assert "UUID" in names(registry.get_compatible_generators("UNIQUEIDENTIFIER"))
    assert "UUID" in names(registry.get_compatible_generators(" uuid "))


def test_helpers():
    assert normalize_sql_type(" decimal(10,2) ") == "DECIMAL(10,2)"
    assert base_type("decimal(10,2)") == "DECIMAL"
    assert base_type("TEXT") == "TEXT"

    registry = create_default_registry(seed=1)
    boolean = registry.get("Boolean")
    assert is_compatible(boolean, "bit")
    assert not is_compatible(boolean, "TIMESTAMP")

"""
Test script for Generation Plan Module.
"""
import pytest

from src.generation_plan import (
    InvalidSchemaError,
    PlanValidationError,
    RowCounts,
    UnresolvedReferenceError,
    plan_generation,
    validate_and_raise,
    validate_generation_plan,
)
from src.generators import create_default_registry
from src.schema_inference import ColumnDescriptor


def column(table, name, generator=None, **kwargs):
    return ColumnDescriptor(table_name=table, column_name=name, generator=generator, **kwargs)


def shop_columns():
    return [
        column("customers", "id", "Sequential Number"),
        column("customers", "name", "First Name"),
        column("orders", "id", "UUID"),
        column("orders", "customer_id", "Foreign Key",
               referenced_table="customers", referenced_column="id"),
        column("orders", "total", "Money", generator_options={"min_amount": 1}),
    ]


def test_basic_plan():
    """Independent and dependent tasks are separated, in schema order."""
    print('=== TEST 1: Basic Plan ===')
    plan = plan_generation(shop_columns(), 10, create_default_registry(seed=1))

    assert plan.table_names == ["customers", "orders"]
    assert [t.key for t in plan.independent] == [
        "customers.id", "customers.name", "orders.id", "orders.total"
    ]
    assert [t.key for t in plan.dependent] == ["orders.customer_id"]
    assert plan.dependent[0].source_key == "customers.id"
    assert plan.get_table("orders").columns == ["id", "customer_id", "total"]
    assert plan.independent[3].options == {"min_amount": 1}
    print('✓ Plan structure correct')


def test_row_count_overrides():
    plan = plan_generation(
        shop_columns(),
        RowCounts(default=10, per_table={"orders": 25}),
        create_default_registry(seed=1),
    )

    assert plan.get_table("customers").row_count == 10
    assert plan.get_table("orders").row_count == 25
    assert all(t.row_count == 25 for t in plan.independent + plan.dependent if t.table_name == "orders")


def test_non_positive_override_uses_default():
    counts = RowCounts(default=7, per_table={"a": 0, "b": -3, "c": None, "d": 2})

    assert counts.for_table("a") == 7
    assert counts.for_table("b") == 7
    assert counts.for_table("c") == 7
    assert counts.for_table("d") == 2
    assert counts.for_table("missing") == 7


def test_missing_reference_fails_planning():
    columns = [
        column("orders", "customer_id", "Foreign Key",
               referenced_table="customers", referenced_column="id"),
    ]
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        plan_generation(columns, 10, create_default_registry(seed=1))

    assert excinfo.value.table_name == "orders"
    assert excinfo.value.column_name == "customer_id"
    assert excinfo.value.reference == "customers.id"


def test_foreign_key_without_reference_fields():
    columns = [column("orders", "customer_id", "Foreign Key")]
    with pytest.raises(UnresolvedReferenceError) as excinfo:
        plan_generation(columns, 10, create_default_registry(seed=1))
    assert excinfo.value.reference is None


def test_foreign_key_cannot_reference_foreign_key():
    columns = shop_columns() + [
        column("items", "order_customer", "Foreign Key",
               referenced_table="orders", referenced_column="customer_id"),
    ]
    with pytest.raises(UnresolvedReferenceError):
        plan_generation(columns, 10, create_default_registry(seed=1))


def test_unassigned_columns_are_skipped():
    columns = shop_columns() + [column("orders", "notes"), column("audit", "entry")]
    plan = plan_generation(columns, 10, create_default_registry(seed=1))

    assert plan.table_names == ["customers", "orders"]
    assert "notes" not in plan.get_table("orders").columns


def test_duplicate_columns_rejected():
    columns = [column("t", "id", "UUID"), column("t", "id", "UUID")]
    with pytest.raises(InvalidSchemaError):
        plan_generation(columns, 10, create_default_registry(seed=1))


def test_unknown_generator_is_planned_as_independent():
    plan = plan_generation([column("t", "x", "Nonexistent")], 3, create_default_registry(seed=1))
    assert [t.generator for t in plan.independent] == ["Nonexistent"]


def test_determinism():
    """Same columns always produce the same plan."""
    registry = create_default_registry(seed=1)
    assert plan_generation(shop_columns(), 5, registry) == plan_generation(shop_columns(), 5, registry)


def test_validator_accepts_planner_output():
    plan = plan_generation(shop_columns(), 5, create_default_registry(seed=1))

    result = validate_generation_plan(plan)
    assert result.is_valid, result.error_summary
    assert result.error_summary == "Plan is valid."
    validate_and_raise(plan.model_dump())


def test_validator_reports_broken_plans():
    plan = plan_generation(shop_columns(), 5, create_default_registry(seed=1)).model_dump()
    plan["dependent"][0]["source_key"] = "customers.missing"
    plan["tables"][0]["row_count"] = 0
    plan["independent"].append(dict(plan["independent"][0]))

    result = validate_generation_plan(plan)
    assert not result.is_valid
    summary = result.error_summary
    assert "customers.missing" in summary
    assert "row_count must be positive" in summary
    assert "Duplicate task" in summary

    with pytest.raises(PlanValidationError):
        validate_and_raise(plan)


def test_validator_rejects_non_dict():
    result = validate_generation_plan(["not", "a", "plan"])
    assert not result.is_valid
    assert result.errors == ["Plan must be a dictionary."]

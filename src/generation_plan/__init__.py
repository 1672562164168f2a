"""
Generation Plan Module
======================

This module turns column descriptors with generator assignments into a
deterministic Generation Plan: independent column tasks, foreign key
tasks that sample them, and per-table row counts.

Public Interface:
-----------------
- plan_generation(columns, row_counts, registry) -> GenerationPlan
- validate_generation_plan(plan) -> ValidationResult
"""

from .plan_generator import (
    # Primary API
    plan_generation,

    # Exceptions
    PlanningError,
    UnresolvedReferenceError,
    InvalidSchemaError,
)

from .generated_plan_validator import (
    # Validation API
    validate_generation_plan,
    validate_and_raise,

    # Data structures
    ValidationResult,

    # Exceptions
    PlanValidationError,
)

from .validators import (
    # Pydantic models
    GenerationPlan,
    TablePlan,
    ColumnTask,
    DependentColumnTask,
    RowCounts,
)

__all__ = [
    # Primary API
    "plan_generation",
    "validate_generation_plan",
    "validate_and_raise",

    # Data structures
    "ValidationResult",
    "GenerationPlan",
    "TablePlan",
    "ColumnTask",
    "DependentColumnTask",
    "RowCounts",

    # Exceptions
    "PlanningError",
    "UnresolvedReferenceError",
    "InvalidSchemaError",
    "PlanValidationError",
]

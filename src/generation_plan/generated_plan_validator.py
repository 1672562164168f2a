"""
Generation Plan Validator
=========================

This module validates Generation Plans produced by plan_generator.py
before they are handed to the executor. It is purely deterministic.

Accepts either a `GenerationPlan` model or its dictionary form
(`plan.model_dump()`), so plans that were serialized and edited by hand
can be checked with the same rules.
"""

from dataclasses import dataclass
from typing import Any

from .validators import GenerationPlan


# =============================================================================
# EXCEPTIONS
# =============================================================================

class PlanValidationError(Exception):
    """Raised when the generation plan fails validation."""
    pass


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass
class ValidationResult:
    """Result of validating a Generation Plan."""
    is_valid: bool
    errors: list[str]

    @property
    def error_summary(self) -> str:
        """Get a formatted summary of all errors."""
        if self.is_valid:
            return "Plan is valid."
        return "; ".join(self.errors)


# =============================================================================
# INTERNAL VALIDATION FUNCTIONS
# =============================================================================

def _task_key(task: dict) -> str:
    return f"{task.get('table_name', '')}.{task.get('column_name', '')}"


def _validate_structure(plan: Any) -> list[str]:
    """Validate basic plan structure."""
    errors = []

    if not isinstance(plan, dict):
        errors.append("Plan must be a dictionary.")
        return errors

    for field_name in ("tables", "independent", "dependent"):
        if field_name not in plan:
            errors.append(f"Plan missing required '{field_name}' field.")
        elif not isinstance(plan[field_name], list):
            errors.append(f"'{field_name}' must be a list.")

    return errors


def _validate_tables(plan: dict) -> list[str]:
    """Validate each table layout has a name, columns and a positive row count."""
    errors = []
    seen: set[str] = set()

    for i, table in enumerate(plan["tables"]):
        if not isinstance(table, dict):
            errors.append(f"Table at index {i} must be a dictionary")
            continue

        name = table.get("name")
        label = name or f"index {i}"
        if not name:
            errors.append(f"Table at index {i} missing 'name' field")
        elif name in seen:
            errors.append(f"Table '{name}' appears more than once")
        else:
            seen.add(name)

        columns = table.get("columns")
        if not isinstance(columns, list) or not columns:
            errors.append(f"Table '{label}' has no columns")

        row_count = table.get("row_count")
        if not isinstance(row_count, int) or isinstance(row_count, bool) or row_count < 1:
            errors.append(f"Table '{label}' row_count must be positive int")

    return errors


def _validate_task_placement(plan: dict) -> list[str]:
    """Every task belongs to a planned table and column, exactly once."""
    errors = []

    layout = {
        table.get("name"): (set(table.get("columns") or []), table.get("row_count"))
        for table in plan["tables"]
        if isinstance(table, dict)
    }
    seen: set[str] = set()

    for task in [*plan["independent"], *plan["dependent"]]:
        key = _task_key(task)
        table_name = task.get("table_name")

        if key in seen:
            errors.append(f"Duplicate task for column '{key}'")
            continue
        seen.add(key)

        if not task.get("generator"):
            errors.append(f"Task '{key}' missing 'generator'")

        if table_name not in layout:
            errors.append(f"Task '{key}' belongs to unplanned table '{table_name}'")
            continue

        columns, row_count = layout[table_name]
        if task.get("column_name") not in columns:
            errors.append(f"Task '{key}' is not part of the '{table_name}' layout")
        if task.get("row_count") != row_count:
            errors.append(
                f"Task '{key}' row_count {task.get('row_count')} does not match "
                f"table row_count {row_count}"
            )

    return errors


def _validate_dependent_sources(plan: dict) -> list[str]:
    """Every dependent task samples an existing independent task."""
    errors = []
    independent_keys = {_task_key(task) for task in plan["independent"]}

    for task in plan["dependent"]:
        source = task.get("source_key")
        if not source:
            errors.append(f"Dependent task '{_task_key(task)}' missing 'source_key'")
        elif source not in independent_keys:
            errors.append(
                f"Dependent task '{_task_key(task)}' references "
                f"'{source}', which is not an independent task"
            )

    return errors


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def validate_generation_plan(plan: GenerationPlan | dict) -> ValidationResult:
    """
    Validate a Generation Plan.

    Args:
        plan: GenerationPlan model or its dictionary form.

    Returns:
        ValidationResult with is_valid and list of errors.
    """
    if isinstance(plan, GenerationPlan):
        plan = plan.model_dump()

    all_errors: list[str] = []

    # Phase 1: Validate basic structure
    structure_errors = _validate_structure(plan)
    all_errors.extend(structure_errors)

    # If basic structure is invalid, can't proceed with deeper validation
    if structure_errors:
        return ValidationResult(is_valid=False, errors=all_errors)

    # Phase 2: Table layouts
    all_errors.extend(_validate_tables(plan))

    # Phase 3: Tasks against layouts and sources
    all_errors.extend(_validate_task_placement(plan))
    all_errors.extend(_validate_dependent_sources(plan))

    return ValidationResult(
        is_valid=len(all_errors) == 0,
        errors=all_errors
    )


def validate_and_raise(plan: GenerationPlan | dict) -> None:
    """
    Validate a Generation Plan and raise if invalid.

    Raises:
        PlanValidationError: If plan is invalid.
    """
    result = validate_generation_plan(plan)
    if not result.is_valid:
        raise PlanValidationError(result.error_summary)

"""
Generation Plan Generator
=========================

Purpose:
--------
Accepts the column descriptors of a schema (with generator assignments)
and produces a Generation Plan: which columns are generated independently,
which are foreign keys that sample another column's output, and how many
rows each table gets.

Public Interface:
-----------------
    def plan_generation(columns, row_counts, registry) -> GenerationPlan

Planning Rules:
---------------
- Columns are grouped by table in first-appearance order.
- Columns without a generator are skipped (partial schemas can still be
  previewed).
- A column assigned the foreign key generator is dependent; every other
  column is independent and keyed `table.column`.
- A dependent column must reference an independent column. Referencing
  another foreign key column, or a column that is not being generated,
  is an UnresolvedReferenceError.
- Row count per table: positive per-table override, else the default.
"""

import logging

from src.generators import GeneratorRegistry
from src.schema_inference import ColumnDescriptor, group_by_table

from .validators import (
    ColumnTask,
    DependentColumnTask,
    GenerationPlan,
    RowCounts,
    TablePlan,
)


logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================

class PlanningError(Exception):
    """Base exception for generation planning failures."""
    pass


class InvalidSchemaError(PlanningError):
    """Raised when the column list is structurally invalid."""
    pass


class UnresolvedReferenceError(PlanningError):
    """
    Raised when a foreign key column does not reference an independent
    column of the same planning pass.
    """

    def __init__(self, table_name: str, column_name: str, reference: str | None):
        self.table_name = table_name
        self.column_name = column_name
        self.reference = reference
        target = reference or "<no reference set>"
        super().__init__(
            f"Foreign key column '{table_name}.{column_name}' references "
            f"'{target}', which is not a generated non-foreign-key column."
        )


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _check_unique_keys(columns: list[ColumnDescriptor]) -> None:
    seen: set[str] = set()
    for column in columns:
        if column.key in seen:
            raise InvalidSchemaError(f"Duplicate column '{column.key}'.")
        seen.add(column.key)


def _build_tasks(
    columns: list[ColumnDescriptor],
    row_counts: RowCounts,
    registry: GeneratorRegistry,
) -> tuple[list[TablePlan], list[ColumnTask], list[ColumnDescriptor]]:
    """
    First pass: table layouts and independent tasks. Foreign key columns
    are returned unresolved for the second pass.
    """
    tables: list[TablePlan] = []
    independent: list[ColumnTask] = []
    foreign_keys: list[ColumnDescriptor] = []

    for table_name, table_columns in group_by_table(columns).items():
        planned = [col for col in table_columns if col.generator]
        if not planned:
            logger.debug("Table %s has no assigned generators, skipping", table_name)
            continue

        row_count = row_counts.for_table(table_name)
        tables.append(TablePlan(
            name=table_name,
            row_count=row_count,
            columns=[col.column_name for col in planned],
        ))

        for col in planned:
            if registry.is_foreign_key(col.generator):
                foreign_keys.append(col)
                continue
            independent.append(ColumnTask(
                table_name=table_name,
                column_name=col.column_name,
                generator=col.generator,
                options=dict(col.generator_options),
                row_count=row_count,
            ))

    return tables, independent, foreign_keys


def _resolve_dependents(
    foreign_keys: list[ColumnDescriptor],
    independent: list[ColumnTask],
    row_counts: RowCounts,
) -> list[DependentColumnTask]:
    """Second pass: point every foreign key at its source task."""
    independent_keys = {task.key for task in independent}
    dependent: list[DependentColumnTask] = []

    for col in foreign_keys:
        reference = col.reference_key
        if reference is None or reference not in independent_keys:
            raise UnresolvedReferenceError(col.table_name, col.column_name, reference)

        dependent.append(DependentColumnTask(
            table_name=col.table_name,
            column_name=col.column_name,
            generator=col.generator,
            options=dict(col.generator_options),
            row_count=row_counts.for_table(col.table_name),
            referenced_table=col.referenced_table,
            referenced_column=col.referenced_column,
            source_key=reference,
        ))

    return dependent


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def plan_generation(
    columns: list[ColumnDescriptor],
    row_counts: RowCounts | int,
    registry: GeneratorRegistry,
) -> GenerationPlan:
    """
    Build a Generation Plan from column descriptors.

    Args:
        columns: Extracted descriptors with generator assignments.
        row_counts: RowCounts, or a plain default row count.
        registry: Catalog used to recognise the foreign key generator.

    Returns:
        GenerationPlan with independent and dependent tasks.

    Raises:
        InvalidSchemaError: If a table.column key appears twice.
        UnresolvedReferenceError: If a foreign key column has no
            independent source column.
    """
    if isinstance(row_counts, int):
        row_counts = RowCounts(default=row_counts)

    _check_unique_keys(columns)

    tables, independent, foreign_keys = _build_tasks(columns, row_counts, registry)
    dependent = _resolve_dependents(foreign_keys, independent, row_counts)

    plan = GenerationPlan(tables=tables, independent=independent, dependent=dependent)

    logger.info(
        "Planned %d tables: %d independent and %d dependent columns",
        len(tables), len(independent), len(dependent)
    )
    return plan

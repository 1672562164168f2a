"""
Generation Executor
===================

Purpose:
--------
Runs a Generation Plan against a GeneratorRegistry and assembles the
generated rows per table.

Public Interface:
-----------------
    async def execute_plan(plan, registry) -> GeneratedDataset
    async def generate_dataset(columns, row_counts, registry) -> GeneratedDataset

Execution Model:
----------------
Phase 1 runs every independent column task concurrently. Each result is
written into its table's row buffer and recorded in the candidate index
under `table.column`.

Phase 2 starts only after phase 1 has completed. Each foreign key column
draws one value per row from the candidate values of its source column.

Any failure aborts the run; no partial dataset is returned.
"""

import asyncio
import logging
from typing import Any

from src.generation_plan import (
    ColumnTask,
    DependentColumnTask,
    GenerationPlan,
    RowCounts,
    plan_generation,
    validate_and_raise,
)
from src.generators import (
    GenerationError,
    GeneratorDefinition,
    GeneratorFailureError,
    GeneratorNotFoundError,
    GeneratorRegistry,
)
from src.schema_inference import ColumnDescriptor

from .dataset import GeneratedDataset, TableData


logger = logging.getLogger(__name__)


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _resolve_generator(task: ColumnTask, registry: GeneratorRegistry) -> GeneratorDefinition:
    generator = registry.get(task.generator)
    if generator is None:
        raise GeneratorNotFoundError(
            f"Generator '{task.generator}' not found for {task.key}",
            table_name=task.table_name,
            column_name=task.column_name,
        )
    return generator


async def _run_generator(
    task: ColumnTask,
    generator: GeneratorDefinition,
    options: dict[str, Any],
) -> list[Any]:
    """
    Call `generate` for one task, tagging failures with the column.
    The generator must return exactly `task.row_count` values.
    """
    try:
        values = list(await generator.generate(task.row_count, options))
    except GenerationError as exc:
        if exc.table_name is None:
            exc.table_name = task.table_name
            exc.column_name = task.column_name
        raise
    except Exception as exc:
        raise GeneratorFailureError(
            f"Generator '{generator.name}' failed for {task.key}: {exc}",
            original_error=exc,
            table_name=task.table_name,
            column_name=task.column_name,
        ) from exc

    if len(values) != task.row_count:
        raise GeneratorFailureError(
            f"Generator '{generator.name}' returned {len(values)} values for {task.key}, "
            f"expected {task.row_count}",
            original_error=ValueError(f"expected {task.row_count} values, got {len(values)}"),
            table_name=task.table_name,
            column_name=task.column_name,
        )
    return values


async def _generate_independent(task: ColumnTask, registry: GeneratorRegistry) -> list[Any]:
    generator = _resolve_generator(task, registry)
    values = await _run_generator(task, generator, task.options)
    logger.debug("Generated %d values for %s with %s", len(values), task.key, generator.name)
    return values


async def _generate_dependent(
    task: DependentColumnTask,
    registry: GeneratorRegistry,
    candidates: dict[str, list[Any]],
) -> list[Any]:
    generator = _resolve_generator(task, registry)
    options = {
        **task.options,
        "referenced_table": task.referenced_table,
        "referenced_column": task.referenced_column,
        "referenced_values": candidates.get(task.source_key, []),
    }
    values = await _run_generator(task, generator, options)
    logger.debug("Drew %d foreign key values for %s from %s", len(values), task.key, task.source_key)
    return values


def _empty_buffers(plan: GenerationPlan) -> dict[str, list[list[Any]]]:
    return {
        table.name: [[None] * len(table.columns) for _ in range(table.row_count)]
        for table in plan.tables
    }


def _write_column(
    buffers: dict[str, list[list[Any]]],
    plan: GenerationPlan,
    task: ColumnTask,
    values: list[Any],
) -> None:
    position = plan.get_table(task.table_name).columns.index(task.column_name)
    rows = buffers[task.table_name]
    for row, value in zip(rows, values):
        row[position] = value


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

async def execute_plan(plan: GenerationPlan, registry: GeneratorRegistry) -> GeneratedDataset:
    """
    Execute a Generation Plan.

    Args:
        plan: Plan produced by `plan_generation`.
        registry: Catalog the plan's generator names resolve against.

    Returns:
        GeneratedDataset with one entry per planned table.

    Raises:
        PlanValidationError: If the plan is malformed.
        GeneratorNotFoundError: If a generator name is not in the registry.
        EmptyReferenceSetError: If a foreign key has no candidate values.
        GeneratorFailureError: If a generator raises anything else.
    """
    validate_and_raise(plan)

    buffers = _empty_buffers(plan)
    candidates: dict[str, list[Any]] = {}

    try:
        # Phase 1: independent columns
        results = await asyncio.gather(
            *(_generate_independent(task, registry) for task in plan.independent)
        )
        for task, values in zip(plan.independent, results):
            candidates[task.key] = values
            _write_column(buffers, plan, task, values)

        # Phase 2: foreign keys, reading the completed candidate index
        results = await asyncio.gather(
            *(_generate_dependent(task, registry, candidates) for task in plan.dependent)
        )
        for task, values in zip(plan.dependent, results):
            _write_column(buffers, plan, task, values)
    except GenerationError as exc:
        logger.error("Generation aborted at %s: %s", exc.column_key, exc)
        raise

    dataset = GeneratedDataset(tables={
        table.name: TableData(columns=list(table.columns), rows=buffers[table.name])
        for table in plan.tables
    })

    logger.info(
        "Generated %d rows across %d tables",
        sum(table.row_count for table in plan.tables), len(plan.tables)
    )
    return dataset


async def generate_dataset(
    columns: list[ColumnDescriptor],
    row_counts: RowCounts | int,
    registry: GeneratorRegistry,
) -> GeneratedDataset:
    """
    Plan and execute in one call.

    Raises:
        PlanningError: From planning, before anything is generated.
        GenerationError: From execution.
    """
    plan = plan_generation(columns, row_counts, registry)
    return await execute_plan(plan, registry)

"""
Generation Plan Validators (Pydantic Models)
=============================================

This module defines the Pydantic models for validating and typing
the Generation Plan structure.
"""

from typing import Any
from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ROW COUNTS
# =============================================================================

class RowCounts(BaseModel):
    """Global default row count plus optional per-table overrides."""
    default: int = Field(default=10, ge=1)
    per_table: dict[str, int | None] = Field(default_factory=dict)

    def for_table(self, table_name: str) -> int:
        """Per-table override if present and positive, else the default."""
        override = self.per_table.get(table_name)
        if override is not None and override > 0:
            return override
        return self.default


# =============================================================================
# COLUMN TASKS
# =============================================================================

class ColumnTask(BaseModel):
    """Generation task for an independent (non foreign key) column."""
    table_name: str
    column_name: str
    generator: str
    options: dict[str, Any] = Field(default_factory=dict)
    row_count: int = Field(..., ge=1)

    @property
    def key(self) -> str:
        return f"{self.table_name}.{self.column_name}"


class DependentColumnTask(ColumnTask):
    """Generation task for a foreign key column."""
    referenced_table: str
    referenced_column: str
    source_key: str = Field(
        ...,
        description="Key of the independent task whose output this column samples"
    )


# =============================================================================
# TABLE PLAN
# =============================================================================

class TablePlan(BaseModel):
    """Output layout for a single table."""
    name: str
    row_count: int = Field(default=10, ge=1)
    columns: list[str] = Field(..., min_length=1)


# =============================================================================
# ROOT MODEL
# =============================================================================

class GenerationPlan(BaseModel):
    """Root model for the complete Generation Plan."""
    tables: list[TablePlan] = Field(default_factory=list)
    independent: list[ColumnTask] = Field(default_factory=list)
    dependent: list[DependentColumnTask] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_dependent_sources(self):
        independent_keys = {task.key for task in self.independent}
        unresolved = [
            task.key for task in self.dependent
            if task.source_key not in independent_keys
        ]
        if unresolved:
            raise ValueError(f"Dependent tasks with unresolved sources: {unresolved}")
        return self

    @property
    def table_names(self) -> list[str]:
        return [table.name for table in self.tables]

    def get_table(self, name: str) -> TablePlan | None:
        for table in self.tables:
            if table.name == name:
                return table
        return None

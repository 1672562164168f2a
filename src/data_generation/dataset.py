"""
Generated Dataset Models
========================

Pydantic models for the executor's output: for every planned table, the
ordered column names and the generated rows.
"""

from typing import Any

from pydantic import BaseModel, Field


class TableData(BaseModel):
    """Column names and row-major values for one table."""
    columns: list[str]
    rows: list[list[Any]] = Field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column_values(self, column_name: str) -> list[Any]:
        """All values of one column, in row order."""
        index = self.columns.index(column_name)
        return [row[index] for row in self.rows]

    def to_records(self) -> list[dict[str, Any]]:
        """Rows as dictionaries keyed by column name."""
        return [dict(zip(self.columns, row)) for row in self.rows]


class GeneratedDataset(BaseModel):
    """Generated tables keyed by name, in plan order."""
    tables: dict[str, TableData] = Field(default_factory=dict)

    @property
    def table_names(self) -> list[str]:
        return list(self.tables)

    def get_table(self, name: str) -> TableData | None:
        return self.tables.get(name)

    def column_values(self, table_name: str, column_name: str) -> list[Any]:
        """
        Raises:
            KeyError: If the table is not part of the dataset.
            ValueError: If the column is not part of the table.
        """
        return self.tables[table_name].column_values(column_name)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        """`{table: {"columns": [...], "rows": [[...]]}}`"""
        return {name: table.model_dump() for name, table in self.tables.items()}

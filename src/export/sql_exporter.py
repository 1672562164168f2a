"""
SQL Exporter
============

Exports a GeneratedDataset as `INSERT` statements, one per row:

    INSERT INTO customers (id, name) VALUES ('1', 'O''Brien');

Literal rules:
- None            -> NULL
- bool            -> TRUE / FALSE
- int / float     -> bare number
- anything else   -> single-quoted string with `'` doubled
"""

import math
from pathlib import Path
from typing import Any

from src.data_generation import GeneratedDataset, TableData


# =============================================================================
# EXCEPTIONS
# =============================================================================

class SqlExportError(Exception):
    """Raised when SQL export fails."""
    pass


# =============================================================================
# CONSTANTS
# =============================================================================

SQL_FILE_NAME = "data_export.sql"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def format_sql_literal(value: Any) -> str:
    """
    Format one Python value as a SQL literal.

    Raises:
        SqlExportError: For non-finite floats, which have no SQL literal.
    """
    if value is None:
        return "NULL"
    # bool before int, bool is an int subclass
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise SqlExportError(f"Cannot export non-finite number {value!r}")
        return repr(value)
    if hasattr(value, "isoformat"):
        value = value.isoformat()
    text = str(value).replace("'", "''")
    return f"'{text}'"


def render_inserts(table_name: str, table: TableData) -> list[str]:
    """One INSERT statement per row of the table."""
    columns = ", ".join(table.columns)
    return [
        f"INSERT INTO {table_name} ({columns}) VALUES "
        f"({', '.join(format_sql_literal(value) for value in row)});"
        for row in table.rows
    ]


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def render_sql(dataset: GeneratedDataset) -> str:
    """Render INSERT statements for every table, tables in plan order."""
    blocks = []
    for table_name, table in dataset.tables.items():
        statements = render_inserts(table_name, table)
        blocks.append("\n".join([f"-- {table_name}", *statements]))
    return "\n\n".join(blocks) + "\n"


def export_to_sql(dataset: GeneratedDataset, output_dir: str | Path) -> list[str]:
    """
    Write the INSERT script to `data_export.sql`.

    Returns:
        List with the generated file path.

    Raises:
        SqlExportError: If export fails.
    """
    if not dataset.tables:
        raise SqlExportError("dataset is empty.")

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    content = render_sql(dataset)
    file_path = output_path / SQL_FILE_NAME
    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise SqlExportError(f"Failed to write {file_path}: {e}") from e

    return [str(file_path)]

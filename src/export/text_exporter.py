"""
Text Exporter
=============

Plain-text preview of a dataset: for every table a `Table: <name>`
heading followed by a fixed-width grid.

    Table: customers
    id | name
    ---+------
    1  | Alice
"""

from pathlib import Path
from typing import Any

from src.data_generation import GeneratedDataset, TableData


class TextExportError(Exception):
    """Raised when text export fails."""
    pass


TEXT_FILE_NAME = "data_export.txt"
COLUMN_SEPARATOR = " | "
NULL_TEXT = "NULL"


def _cell(value: Any) -> str:
    return NULL_TEXT if value is None else str(value)


def render_table(table: TableData) -> str:
    """Fixed-width grid: header, separator line, one line per row."""
    cells = [[_cell(value) for value in row] for row in table.rows]
    widths = [
        max([len(column), *(len(row[i]) for row in cells)])
        for i, column in enumerate(table.columns)
    ]

    def line(values: list[str]) -> str:
        return COLUMN_SEPARATOR.join(
            value.ljust(width) for value, width in zip(values, widths)
        ).rstrip()

    separator = "-+-".join("-" * width for width in widths)
    return "\n".join([line(table.columns), separator, *(line(row) for row in cells)])


def render_text(dataset: GeneratedDataset) -> str:
    """Render every table with its heading, separated by blank lines."""
    blocks = [
        f"Table: {table_name}\n{render_table(table)}"
        for table_name, table in dataset.tables.items()
    ]
    return "\n\n".join(blocks) + "\n"


def export_to_text(dataset: GeneratedDataset, output_dir: str | Path) -> list[str]:
    """
    Write the text preview to `data_export.txt`.

    Raises:
        TextExportError: If export fails.
    """
    if not dataset.tables:
        raise TextExportError("dataset is empty.")

    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    file_path = output_path / TEXT_FILE_NAME
    try:
        file_path.write_text(render_text(dataset), encoding="utf-8")
    except OSError as e:
        raise TextExportError(f"Failed to write {file_path}: {e}") from e

    return [str(file_path)]

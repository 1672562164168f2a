"""
CSV Exporter
============

Exports generated tables to CSV.

Two layouts:
- one file per table with a header row (`export_to_csv`)
- a single combined document where each table starts with a
  `Table: <name>` line and every value is quoted (`render_combined_csv`)
"""

import csv
import io
from pathlib import Path
from typing import Any

from src.data_generation import GeneratedDataset, TableData


# =============================================================================
# EXCEPTIONS
# =============================================================================

class CsvExportError(Exception):
    """Raised when CSV export fails."""
    pass


# =============================================================================
# CONSTANTS
# =============================================================================

# Representation of NULL values in CSV
NULL_REPRESENTATION = ""

COMBINED_FILE_NAME = "data_export.csv"


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def render_csv(table: TableData) -> str:
    """Render one table as CSV text: header row, then one line per row."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    _write_table(writer, table)
    return buffer.getvalue()


def render_combined_csv(dataset: GeneratedDataset) -> str:
    """
    Render all tables into one document. Each table is introduced by a
    `Table: <name>` line and followed by a blank line.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    for table_name, table in dataset.tables.items():
        buffer.write(f"Table: {table_name}\n")
        _write_table(writer, table)
        buffer.write("\n")
    return buffer.getvalue()


def export_to_csv(
    dataset: GeneratedDataset,
    output_dir: str | Path,
    single_file: bool = False
) -> list[str]:
    """
    Export the tables of a dataset to CSV.

    Args:
        dataset: Generated dataset.
        output_dir: Directory to write files to.
        single_file: If True, write the combined document instead of one
                     file per table.

    Returns:
        List of generated file paths.

    Raises:
        CsvExportError: If export fails.
    """
    if not dataset.tables:
        raise CsvExportError("dataset is empty.")

    # Ensure output directory exists
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    if single_file:
        file_path = output_path / COMBINED_FILE_NAME
        _write_text(render_combined_csv(dataset), file_path)
        return [str(file_path)]

    generated_files = []
    for table_name, table in dataset.tables.items():
        file_path = _table_file(output_path, table_name)
        _write_text(render_csv(table), file_path)
        generated_files.append(str(file_path))

    return generated_files


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _cell(value: Any) -> Any:
    # Convert None to empty string
    return NULL_REPRESENTATION if value is None else value


def _write_table(writer: Any, table: TableData) -> None:
    writer.writerow(table.columns)
    for row in table.rows:
        writer.writerow([_cell(value) for value in row])


def _write_text(content: str, file_path: Path) -> None:
    try:
        with open(file_path, "w", newline="", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        raise CsvExportError(f"Failed to write {file_path}: {e}") from e


def _table_file(output_path: Path, table_name: str) -> Path:
    """`<table>.csv` directly inside `output_path`."""
    file_path = output_path / f"{table_name}.csv"
    if file_path.resolve().parent != output_path.resolve():
        raise CsvExportError(f"Table name {table_name!r} does not map to a file in {output_path}")
    return file_path

"""
JSON Exporter
=============

Serializes a GeneratedDataset to JSON as
`{table: {"columns": [...], "rows": [[...]]}}`.
Table and column order follow the plan.
"""

import json
from typing import Any
from pathlib import Path

from src.data_generation import GeneratedDataset


# =============================================================================
# EXCEPTIONS
# =============================================================================

class JsonExportError(Exception):
    """Raised when JSON export fails."""
    pass


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def render_json(dataset: GeneratedDataset) -> str:
    """Render the whole dataset as one JSON document."""
    return _dumps(dataset.to_dict())


def export_to_json(
    dataset: GeneratedDataset,
    output_dir: str | Path,
    single_file: bool = True
) -> list[str]:
    """
    Export a dataset to JSON file(s).

    Args:
        dataset: Generated dataset.
        output_dir: Directory to write files to.
        single_file: If True, export all tables to `data_export.json`.
                     If False, one `<table>.json` file per table.

    Returns:
        List of generated file paths.

    Raises:
        JsonExportError: If export fails.
    """
    if not dataset.tables:
        raise JsonExportError("dataset is empty.")

    # Ensure output directory exists
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    generated_files = []

    if single_file:
        file_path = output_path / "data_export.json"
        _write_json(dataset.to_dict(), file_path)
        generated_files.append(str(file_path))
    else:
        for table_name, table in dataset.tables.items():
            file_path = _table_file(output_path, table_name)
            _write_json(table.model_dump(), file_path)
            generated_files.append(str(file_path))

    return generated_files


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _dumps(data: Any) -> str:
    try:
        return json.dumps(data, indent=2, ensure_ascii=False, default=_json_serializer)
    except (TypeError, ValueError) as e:
        raise JsonExportError(f"Dataset is not JSON serializable: {e}") from e


def _write_json(data: Any, file_path: Path) -> None:
    """Write data to JSON file with consistent formatting."""
    content = _dumps(data)
    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise JsonExportError(f"Failed to write {file_path}: {e}") from e


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for types not natively supported."""
    # Handle datetime objects
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def _table_file(output_path: Path, table_name: str) -> Path:
    """`<table>.json` directly inside `output_path`."""
    file_path = output_path / f"{table_name}.json"
    if file_path.resolve().parent != output_path.resolve():
        raise JsonExportError(f"Table name {table_name!r} does not map to a file in {output_path}")
    return file_path

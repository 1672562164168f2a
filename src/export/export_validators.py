"""
Export Validators
=================

Validates exported files for correctness.
Performs sanity checks on JSON, CSV, XML and SQL outputs.
"""

import csv
import json
import re
import xml.etree.ElementTree as ET
from pathlib import Path


# =============================================================================
# EXCEPTIONS
# =============================================================================

class ExportValidationError(Exception):
    """Raised when export validation fails."""
    pass


# =============================================================================
# CONSTANTS
# =============================================================================

_INSERT_RE = re.compile(r"^INSERT INTO (\w+) \((.+?)\) VALUES \((.*)\);$", re.DOTALL)


# =============================================================================
# HELPERS
# =============================================================================

def _read(path: str, kind: str) -> str:
    file_path = Path(path)
    if not file_path.exists():
        raise ExportValidationError(f"{kind} file not found: {path}")
    try:
        return file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExportValidationError(f"Failed to read {kind} {path}: {e}") from e


def _check_count(name: str, actual: int, expected_counts: dict[str, int] | None, kind: str) -> None:
    if not expected_counts:
        return
    expected = expected_counts.get(name)
    if expected is not None and actual != expected:
        raise ExportValidationError(
            f"{kind} {name} has {actual} rows, expected {expected}"
        )


# =============================================================================
# JSON VALIDATION
# =============================================================================

def validate_json_export(file_paths: list[str]) -> bool:
    """
    Validate JSON files are parseable and shaped as
    `{table: {"columns": [...], "rows": [...]}}` (or a single table entry).

    Returns:
        True if all files are valid.

    Raises:
        ExportValidationError: If validation fails.
    """
    for path in file_paths:
        try:
            data = json.loads(_read(path, "JSON"))
        except json.JSONDecodeError as e:
            raise ExportValidationError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ExportValidationError(f"JSON root must be an object: {path}")

        tables = [data] if "columns" in data else list(data.values())
        for table in tables:
            if not isinstance(table, dict) or "columns" not in table or "rows" not in table:
                raise ExportValidationError(f"JSON table entry missing columns/rows: {path}")
            width = len(table["columns"])
            if any(len(row) != width for row in table["rows"]):
                raise ExportValidationError(f"JSON row width mismatch in {path}")

    return True


# =============================================================================
# CSV VALIDATION
# =============================================================================

def validate_csv_export(
    file_paths: list[str],
    expected_counts: dict[str, int] | None = None
) -> bool:
    """
    Validate per-table CSV files have headers and expected row counts.

    Args:
        file_paths: List of CSV file paths to validate.
        expected_counts: Optional dict of table_name -> expected row count.

    Returns:
        True if all files are valid.

    Raises:
        ExportValidationError: If validation fails.
    """
    for path in file_paths:
        content = _read(path, "CSV")
        rows = list(csv.reader(content.splitlines()))

        if len(rows) == 0:
            raise ExportValidationError(f"CSV file is empty: {path}")

        # First row should be header
        header = rows[0]
        if not header:
            raise ExportValidationError(f"CSV has empty header: {path}")

        if any(len(row) != len(header) for row in rows[1:]):
            raise ExportValidationError(f"CSV row width mismatch in {path}")

        _check_count(Path(path).stem, len(rows) - 1, expected_counts, "CSV")

    return True


# =============================================================================
# XML VALIDATION
# =============================================================================

def validate_xml_export(
    file_path: str,
    expected_counts: dict[str, int] | None = None
) -> bool:
    """
    Validate the XML document parses and has `<data><table><row>` structure.

    Raises:
        ExportValidationError: If validation fails.
    """
    content = _read(file_path, "XML")
    try:
        root = ET.fromstring(content.encode("utf-8"))
    except ET.ParseError as e:
        raise ExportValidationError(f"Invalid XML in {file_path}: {e}") from e

    if root.tag != "data":
        raise ExportValidationError(f"XML root must be <data>: {file_path}")

    for table in root.findall("table"):
        name = table.get("name")
        if not name:
            raise ExportValidationError(f"XML table without name: {file_path}")
        _check_count(name, len(table.findall("row")), expected_counts, "XML")

    return True


# =============================================================================
# SQL VALIDATION
# =============================================================================

def validate_sql_export(
    file_path: str,
    expected_counts: dict[str, int] | None = None
) -> bool:
    """
    Validate SQL file has basic structure.

    Performs lightweight checks:
    - File exists and is non-empty
    - Every statement line is a single-row INSERT
    - Column and value counts agree
    - Optional per-table statement counts

    Args:
        file_path: Path to SQL file.
        expected_counts: Optional dict of table_name -> expected row count.

    Returns:
        True if file passes basic validation.

    Raises:
        ExportValidationError: If validation fails.
    """
    content = _read(file_path, "SQL")

    if not content.strip():
        raise ExportValidationError(f"SQL file is empty: {file_path}")

    if "INSERT INTO" not in content.upper():
        raise ExportValidationError(f"SQL file has no INSERT statements: {file_path}")

    counts: dict[str, int] = {}
    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("--"):
            continue

        match = _INSERT_RE.match(line)
        if not match:
            raise ExportValidationError(f"Malformed statement in {file_path}: {line[:80]}")

        table_name, columns, values = match.groups()
        # Quotes come in pairs, doubled quotes included
        if values.count("'") % 2 != 0:
            raise ExportValidationError(f"Unbalanced quotes in {file_path}: {line[:80]}")
        if len(_split_values(values)) != len(columns.split(",")):
            raise ExportValidationError(
                f"Column/value count mismatch in {file_path}: {line[:80]}"
            )
        counts[table_name] = counts.get(table_name, 0) + 1

    for table_name, expected in (expected_counts or {}).items():
        _check_count(table_name, counts.get(table_name, 0), {table_name: expected}, "SQL")

    return True


def _split_values(values: str) -> list[str]:
    """Split a VALUES list on commas outside single-quoted strings."""
    parts = []
    current = []
    in_string = False
    for char in values:
        if char == "'":
            in_string = not in_string
        elif char == "," and not in_string:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts

"""
Schema Inference Module
=======================

Purpose:
--------
Accepts raw SQL text containing one or more `CREATE TABLE` statements and
infers a flat, ordered list of column descriptors (table, column, type,
default value).

Public Interface:
-----------------
    def extract_schema(raw_sql: str) -> list[ColumnDescriptor]

Parsing Strategy:
-----------------
This is a permissive heuristic parser, not a SQL grammar:
- The text is split on `CREATE TABLE` (case-insensitive).
- The column body of each table is everything between the FIRST "(" and
  the LAST ")" of its chunk. Parenthesised clauses that follow the real
  closing parenthesis (e.g. `WITH (DATA_COMPRESSION = PAGE)`) end up in
  the body; this is a known limitation.
- The body is split on commas at parenthesis depth zero, so
  `DECIMAL(10,2)` stays a single column definition.
- Constraint/index lines and fragments that do not look like
  `<name> <type> [rest]` are dropped silently.

Extraction never raises. Callers that need strict validation must compare
the result against their own expectations.
"""

import logging
import re
from pathlib import Path

from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


# =============================================================================
# DATA STRUCTURES
# =============================================================================

class ColumnDescriptor(BaseModel):
    """
    One inferred column.

    The extractor fills table/column/type/default. Generator assignment
    and foreign key references are filled in by the caller.
    """
    table_name: str
    column_name: str
    data_type: str = ""
    default_value: str | None = None
    generator: str | None = None
    generator_options: dict = Field(default_factory=dict)
    referenced_table: str | None = None
    referenced_column: str | None = None

    @property
    def key(self) -> str:
        return f"{self.table_name}.{self.column_name}"

    @property
    def reference_key(self) -> str | None:
        if not self.referenced_table or not self.referenced_column:
            return None
        return f"{self.referenced_table}.{self.referenced_column}"


# =============================================================================
# CONSTANTS
# =============================================================================

_CREATE_TABLE_RE = re.compile(r"create\s+table\s+", re.IGNORECASE)

# First identifier directly before an opening parenthesis, optionally
# wrapped in [], `` or "" ("core"."tenants" ( -> tenants)
_TABLE_NAME_RE = re.compile(r"[\[`\"]?(\w+)[\]`\"]?\s*\(", re.IGNORECASE)

_COLUMN_RE = re.compile(
    r"^(\w+)\s+([^\s]+(?:\([^)]+\))?)\s*(.*)$",
    re.IGNORECASE | re.DOTALL,
)

_DEFAULT_RE = re.compile(r"default\s+([^,\s]+)", re.IGNORECASE)

_IDENTIFIER_DELIMITERS_RE = re.compile(r"[\[\]\"`]")
_QUOTE_CHARS_RE = re.compile(r"['\"`]")

SKIPPED_PREFIXES = ("CONSTRAINT", "PRIMARY KEY", "FOREIGN KEY", "INDEX")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def split_top_level(body: str, separator: str = ",") -> list[str]:
    """
    Split `body` on `separator`, ignoring separators nested inside
    parentheses.

    An unbalanced ")" never drives the depth below zero.
    """
    parts: list[str] = []
    depth = 0
    current: list[str] = []

    for char in body:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)

    parts.append("".join(current))
    return parts


def _is_column_fragment(fragment: str) -> bool:
    upper = fragment.strip().upper()
    if not upper:
        return False
    return not upper.startswith(SKIPPED_PREFIXES)


def _extract_table_name(chunk: str) -> str | None:
    match = _TABLE_NAME_RE.search(chunk)
    if not match:
        return None
    return _IDENTIFIER_DELIMITERS_RE.sub("", match.group(1))


def _extract_body(chunk: str) -> str:
    """Text between the first "(" and the last ")" of the chunk."""
    start = chunk.find("(")
    end = chunk.rfind(")")
    if start == -1 or end <= start:
        return ""
    return chunk[start + 1:end]


def _parse_column(table_name: str, fragment: str) -> ColumnDescriptor | None:
    """Parse one column definition. Returns None if it does not match."""
    cleaned = _IDENTIFIER_DELIMITERS_RE.sub("", fragment.strip())
    match = _COLUMN_RE.match(cleaned)
    if not match:
        return None

    column_name, data_type, rest = match.groups()

    default_value = None
    default_match = _DEFAULT_RE.search(rest)
    if default_match:
        default_value = _QUOTE_CHARS_RE.sub("", default_match.group(1))

    return ColumnDescriptor(
        table_name=table_name,
        column_name=column_name,
        data_type=data_type.upper().strip(),
        default_value=default_value,
    )


def _extract_table(chunk: str) -> list[ColumnDescriptor]:
    table_name = _extract_table_name(chunk)
    if not table_name:
        logger.debug("Skipping CREATE TABLE chunk without a table name: %r", chunk[:60])
        return []

    columns: list[ColumnDescriptor] = []
    for fragment in split_top_level(_extract_body(chunk)):
        if not _is_column_fragment(fragment):
            continue
        column = _parse_column(table_name, fragment)
        if column is None:
            logger.debug("Dropping unparseable fragment in %s: %r", table_name, fragment.strip())
            continue
        columns.append(column)

    return columns


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def extract_schema(raw_sql: str) -> list[ColumnDescriptor]:
    """
    Extract column descriptors from raw SQL DDL.

    Args:
        raw_sql: SQL text with one or more CREATE TABLE statements.

    Returns:
        Column descriptors, tables in source order and columns in source
        order within each table. Empty if nothing could be parsed.
    """
    if not raw_sql:
        return []

    chunks = _CREATE_TABLE_RE.split(raw_sql)[1:]

    columns: list[ColumnDescriptor] = []
    for chunk in chunks:
        columns.extend(_extract_table(chunk))

    logger.info(
        "Extracted %d columns from %d CREATE TABLE statements",
        len(columns), len(chunks)
    )
    return columns


def extract_schema_file(path: str | Path) -> list[ColumnDescriptor]:
    """
    Read a .sql file and extract its column descriptors.

    Raises:
        OSError: If the file cannot be read.
    """
    text = Path(path).read_text(encoding="utf-8")
    return extract_schema(text)


def group_by_table(columns: list[ColumnDescriptor]) -> dict[str, list[ColumnDescriptor]]:
    """Group descriptors by table, preserving first-appearance order."""
    tables: dict[str, list[ColumnDescriptor]] = {}
    for column in columns:
        tables.setdefault(column.table_name, []).append(column)
    return tables

"""
Schema Validation Module
========================

Lightweight, deterministic checks on raw SQL input and on extracted
column lists:

- basic SQL shape check (statement keywords, balanced parentheses)
- heuristic SQL dialect detection with a confidence score
- detection of columns that still have no generator assigned

None of this validates SQL semantics; it only feeds user-facing hints.
"""

import re
from dataclasses import dataclass, field

from .infer_schema import ColumnDescriptor


# =============================================================================
# DATA STRUCTURES
# =============================================================================

@dataclass
class SqlDialect:
    """One detected dialect with the features that matched."""
    name: str
    confidence: float
    features: list[str]
    is_valid: bool = True


@dataclass
class SqlValidationResult:
    """Result of validating raw SQL text."""
    is_valid: bool
    dialects: list[SqlDialect] = field(default_factory=list)
    error: str | None = None

    @property
    def primary_dialect(self) -> str | None:
        """Most confident dialect name, if any."""
        return self.dialects[0].name if self.dialects else None


# =============================================================================
# CONSTANTS
# =============================================================================

INVALID_SQL_MESSAGE = "Invalid SQL syntax: Missing basic SQL structure or invalid syntax"

ANSI_SQL = "ANSI SQL"

DIALECT_FEATURES: dict[str, tuple[str, ...]] = {
    "T-SQL": (
        "DECLARE @", "EXEC ", "EXECUTE ", "IDENTITY(", "NVARCHAR", "TOP ",
        "MERGE", "OUTPUT", "CROSS APPLY", "OUTER APPLY", "NOLOCK",
        "ROWGUIDCOL", "UNIQUEIDENTIFIER", "DATETIME2", "DATETIMEOFFSET",
    ),
    "PL/SQL": (
        "BEGIN", "END;", "DECLARE", "PACKAGE", "VARCHAR2", "NUMBER(",
        "CLOB", "NCLOB", "BINARY_INTEGER", "EXCEPTION", "RAISE", "ROWTYPE",
    ),
    "PostgreSQL": (
        "SERIAL", "TEXT", "RETURNING", "CREATE EXTENSION",
        "USING INDEX TABLESPACE", "BYTEA", "UUID", "JSONB", "WITH OIDS",
        "TABLESPACE", "CONCURRENTLY", "MATERIALIZED VIEW", "USING GIST",
        "USING GIN",
    ),
    "MySQL": (
        "ENGINE=", "AUTO_INCREMENT", "UNSIGNED", "SHOW ", "TINYINT",
        "MEDIUMINT", "LONGTEXT", "ENUM", "SPATIAL", "FULLTEXT",
    ),
    "SQLite": (
        "AUTOINCREMENT", "PRAGMA", "VACUUM", "WITHOUT ROWID", "STRICT",
        "DEFERRABLE",
    ),
    "Oracle": (
        "VARCHAR2", "NUMBER(", "ROWNUM", "CONNECT BY", "MINUS", "LONG RAW",
        "BFILE", "ROWID", "UROWID",
    ),
}

_STATEMENT_PATTERNS = (
    re.compile(r"CREATE\s+TABLE", re.IGNORECASE),
    re.compile(r"ALTER\s+TABLE", re.IGNORECASE),
    re.compile(r"SELECT\s+.*\s+FROM", re.IGNORECASE),
    re.compile(r"INSERT\s+INTO", re.IGNORECASE),
)

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


# =============================================================================
# VALIDATION LOGIC
# =============================================================================

def _has_balanced_parentheses(text: str) -> bool:
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def _is_basically_valid_sql(sql: str) -> bool:
    has_statement = any(pattern.search(sql) for pattern in _STATEMENT_PATTERNS)
    return (
        has_statement
        and _has_balanced_parentheses(sql)
        and ";;" not in sql
        and _IDENTIFIER_RE.search(sql) is not None
    )


def detect_dialects(sql: str) -> list[SqlDialect]:
    """
    Score each known dialect by the share of its feature list found in
    the text. ANSI SQL is always reported with full confidence.

    Returns:
        Dialects sorted by confidence, highest first.
    """
    upper_sql = sql.upper()
    results = [SqlDialect(name=ANSI_SQL, confidence=100.0, features=["Standard SQL syntax"])]

    for dialect, features in DIALECT_FEATURES.items():
        found = [feature for feature in features if feature.upper() in upper_sql]
        if found:
            results.append(SqlDialect(
                name=dialect,
                confidence=len(found) / len(features) * 100,
                features=found,
            ))

    return sorted(results, key=lambda d: d.confidence, reverse=True)


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def validate_sql(sql: str) -> SqlValidationResult:
    """
    Check raw SQL for basic structure and detect likely dialects.

    Args:
        sql: Raw SQL text.

    Returns:
        SqlValidationResult; `dialects` is empty when the text is invalid.
    """
    if not sql or not _is_basically_valid_sql(sql):
        return SqlValidationResult(is_valid=False, error=INVALID_SQL_MESSAGE)

    return SqlValidationResult(is_valid=True, dialects=detect_dialects(sql))


def find_unassigned_columns(columns: list[ColumnDescriptor]) -> list[ColumnDescriptor]:
    """Columns that have no generator assigned yet."""
    return [col for col in columns if not col.generator]

"""
Schema Inference Module
=======================

Heuristic extraction of column metadata from SQL `CREATE TABLE` text,
plus lightweight SQL validation and dialect detection.

Usage:
------
1. Call `extract_schema(sql)` to get a list of `ColumnDescriptor`
2. Caller assigns a generator to each descriptor
3. Pass the descriptors to `generation_plan.plan_generation`
"""

from .infer_schema import (
    # Primary API
    extract_schema,
    extract_schema_file,
    split_top_level,
    group_by_table,

    # Data structures
    ColumnDescriptor,
)

from .infer_schema_validator import (
    # Validation functions
    validate_sql,
    detect_dialects,
    find_unassigned_columns,

    # Data structures
    SqlDialect,
    SqlValidationResult,
)

__all__ = [
    # Primary API
    "extract_schema",
    "extract_schema_file",
    "split_top_level",
    "group_by_table",
    "validate_sql",
    "detect_dialects",
    "find_unassigned_columns",

    # Data structures
    "ColumnDescriptor",
    "SqlDialect",
    "SqlValidationResult",
]

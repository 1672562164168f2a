"""
API Request/Response Schemas
============================

Pydantic models for API request and response validation.
"""

import math
import re
from typing import Any, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.app.config import DEFAULT_ROW_COUNT
from src.data_generation import TableData
from src.schema_inference import ColumnDescriptor


ExportFormat = Literal["json", "csv", "xml", "txt", "sql"]

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

# Table and column names as the extractor produces them
_IDENTIFIER_RE = re.compile(r"\w+")


def coerce_row_count(value: Any) -> int | None:
    """
    Read a row count the way form input is read: leading integer of a
    string, integer part of a number. Returns None when nothing numeric
    is found.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        return int(match.group(1)) if match else None
    return None


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class ExtractRequest(BaseModel):
    """Request body for POST /schema/extract endpoint."""

    sql: str = Field(
        ...,
        min_length=1,
        description="Raw SQL text containing CREATE TABLE statements"
    )


class GenerateRequest(BaseModel):
    """Request body for POST /data/generate endpoint."""

    columns: list[ColumnDescriptor] = Field(
        ...,
        min_length=1,
        description="Column descriptors with generator assignments"
    )
    default_row_count: int = Field(
        default=DEFAULT_ROW_COUNT,
        description="Rows per table unless overridden; values below 1 become 1"
    )
    table_row_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Per-table row count overrides; non-positive values are ignored"
    )
    export_formats: list[ExportFormat] = Field(
        default_factory=list,
        description="Output formats to write"
    )
    include_plan: bool = Field(
        default=False,
        description="Include the generation plan in the response (debug only)"
    )

    @field_validator("columns")
    @classmethod
    def require_plain_identifiers(cls, columns: list[ColumnDescriptor]) -> list[ColumnDescriptor]:
        """Names end up in export file names, so only word characters pass."""
        for column in columns:
            for field_name in ("table_name", "column_name", "referenced_table", "referenced_column"):
                value = getattr(column, field_name)
                if not value and field_name.startswith("referenced_"):
                    continue
                if not _IDENTIFIER_RE.fullmatch(value or ""):
                    raise ValueError(f"{field_name} {value!r} is not a plain SQL identifier")
        return columns

    @field_validator("default_row_count", mode="before")
    @classmethod
    def coerce_default_row_count(cls, value: Any) -> int:
        count = coerce_row_count(value)
        return max(1, count or 1)

    @field_validator("table_row_counts", mode="before")
    @classmethod
    def drop_unusable_overrides(cls, value: Any) -> dict[str, int]:
        if not isinstance(value, dict):
            return {}
        overrides = {}
        for table_name, raw in value.items():
            count = coerce_row_count(raw)
            if count is not None and count > 0:
                overrides[str(table_name)] = count
        return overrides


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class DialectInfo(BaseModel):
    """One detected SQL dialect."""

    name: str
    confidence: float
    features: list[str] = Field(default_factory=list)


class SqlValidationInfo(BaseModel):
    """SQL validation summary returned with extracted columns."""

    is_valid: bool
    error: Optional[str] = None
    primary_dialect: Optional[str] = None
    dialects: list[DialectInfo] = Field(default_factory=list)


class ExtractResponse(BaseModel):
    """Response for POST /schema/extract."""

    columns: list[ColumnDescriptor]
    validation: SqlValidationInfo


class GeneratorInfo(BaseModel):
    """Public view of one catalog entry."""

    key: str
    name: str
    description: str
    category: str
    compatible_types: list[str]
    default_options: dict[str, Any] = Field(default_factory=dict)


class GeneratorListResponse(BaseModel):
    """Response for GET /generators."""

    sql_type: Optional[str] = None
    generators: list[GeneratorInfo]


class GeneratedFiles(BaseModel):
    """File paths grouped by format. JSON paths are serialized as `json`."""

    model_config = ConfigDict(populate_by_name=True)

    json_files: list[str] = Field(default_factory=list, alias="json")
    csv: list[str] = Field(default_factory=list)
    xml: list[str] = Field(default_factory=list)
    txt: list[str] = Field(default_factory=list)
    sql: list[str] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    """Response for POST /data/generate."""

    status: Literal["success"] = "success"
    run_id: str
    dataset: dict[str, TableData]
    files: GeneratedFiles = Field(default_factory=GeneratedFiles)

    # Present if include_plan=True
    plan: Optional[dict] = None


class HealthResponse(BaseModel):
    """Response for GET /health endpoint."""

    status: str = "ok"


class VersionResponse(BaseModel):
    """Response for GET /version endpoint."""

    version: str
    name: str = "SQL Schema Synthetic Data Generator"


class ErrorResponse(BaseModel):
    """Standard error response."""

    status: str = "error"
    message: str
    detail: Optional[str] = None
    column: Optional[str] = None

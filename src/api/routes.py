"""
API Routes
==========

Endpoint definitions for the Synthetic Data Generator API.
Implements the interactive two-step workflow:
  1. POST /schema/extract - Extract columns from SQL and validate it
  2. POST /data/generate  - Generate rows for columns with assigned generators

GET /generators lists the catalog, optionally filtered by SQL type.

This module orchestrates the pipeline without adding business logic.
Domain errors propagate to the handlers registered in `src.app.main`.
"""

import logging
import uuid
from functools import lru_cache
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends

from .schemas import (
    DialectInfo,
    ErrorResponse,
    ExtractRequest,
    ExtractResponse,
    GenerateRequest,
    GenerateResponse,
    GeneratedFiles,
    GeneratorInfo,
    GeneratorListResponse,
    HealthResponse,
    SqlValidationInfo,
    VersionResponse,
)

# Import core pipeline functions
from src.data_generation import GeneratedDataset, execute_plan
from src.export import (
    export_to_csv,
    export_to_json,
    export_to_sql,
    export_to_text,
    export_to_xml,
    validate_csv_export,
    validate_json_export,
    validate_sql_export,
    validate_xml_export,
)
from src.generation_plan import RowCounts, plan_generation
from src.generators import GeneratorDefinition, GeneratorRegistry, create_default_registry
from src.schema_inference import extract_schema, validate_sql

# Import config
from src.app import config as app_config


logger = logging.getLogger(__name__)


# =============================================================================
# ROUTER
# =============================================================================

router = APIRouter()


# =============================================================================
# DEPENDENCIES
# =============================================================================

@lru_cache(maxsize=1)
def get_registry() -> GeneratorRegistry:
    """Shared generator registry, seeded from SDG_SEED when set."""
    return create_default_registry(seed=app_config.SEED)


# =============================================================================
# HELPERS
# =============================================================================

def _generator_info(generator: GeneratorDefinition) -> GeneratorInfo:
    return GeneratorInfo(
        key=generator.key,
        name=generator.name,
        description=generator.description,
        category=generator.category.value,
        compatible_types=list(generator.compatible_types),
        default_options=generator.default_options,
    )


def _export(dataset: GeneratedDataset, formats: list[str], output_dir: Path) -> GeneratedFiles:
    """Write each requested format and check the written files."""
    files = GeneratedFiles()
    expected_counts = {name: table.row_count for name, table in dataset.tables.items()}

    if "json" in formats:
        files.json_files = export_to_json(dataset, output_dir)
        validate_json_export(files.json_files)

    if "csv" in formats:
        files.csv = export_to_csv(dataset, output_dir)
        validate_csv_export(files.csv, expected_counts)

    if "xml" in formats:
        files.xml = export_to_xml(dataset, output_dir)
        validate_xml_export(files.xml[0], expected_counts)

    if "txt" in formats:
        files.txt = export_to_text(dataset, output_dir)

    if "sql" in formats:
        files.sql = export_to_sql(dataset, output_dir)
        validate_sql_export(files.sql[0], expected_counts)

    return files


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("/schema/extract", response_model=ExtractResponse)
def extract_columns(request: ExtractRequest) -> ExtractResponse:
    """
    Step 1: Extract column descriptors from SQL and report validity and
    likely dialects. Extraction runs even when validation fails.
    """
    columns = extract_schema(request.sql)
    result = validate_sql(request.sql)

    return ExtractResponse(
        columns=columns,
        validation=SqlValidationInfo(
            is_valid=result.is_valid,
            error=result.error,
            primary_dialect=result.primary_dialect,
            dialects=[
                DialectInfo(name=d.name, confidence=d.confidence, features=d.features)
                for d in result.dialects
            ],
        ),
    )


@router.get("/generators", response_model=GeneratorListResponse)
def list_generators(
    sql_type: Optional[str] = None,
    registry: GeneratorRegistry = Depends(get_registry),
) -> GeneratorListResponse:
    """List the catalog, or the generators compatible with `sql_type`."""
    if sql_type:
        generators = registry.get_compatible_generators(sql_type)
    else:
        generators = registry.get_all()

    return GeneratorListResponse(
        sql_type=sql_type,
        generators=[_generator_info(g) for g in generators],
    )


@router.post(
    "/data/generate",
    response_model=GenerateResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_data(
    request: GenerateRequest,
    registry: GeneratorRegistry = Depends(get_registry),
) -> GenerateResponse:
    """
    Step 2: Plan and execute generation, then write requested exports.
    """
    run_id = str(uuid.uuid4())
    row_counts = RowCounts(
        default=request.default_row_count,
        per_table=request.table_row_counts,
    )

    plan = plan_generation(request.columns, row_counts, registry)
    dataset = await execute_plan(plan, registry)

    files = GeneratedFiles()
    if request.export_formats and not dataset.tables:
        logger.warning("Run %s generated no tables; skipping exports", run_id)
    elif request.export_formats:
        output_dir = Path(app_config.get_output_dir()) / run_id
        files = _export(dataset, request.export_formats, output_dir)
        logger.info("Run %s exported %s to %s", run_id, request.export_formats, output_dir)

    return GenerateResponse(
        run_id=run_id,
        dataset=dataset.tables,
        files=files,
        plan=plan.model_dump() if request.include_plan else None,
    )


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok")


@router.get("/version", response_model=VersionResponse)
def get_version() -> VersionResponse:
    """Get API version."""
    return VersionResponse(version=app_config.VERSION, name=app_config.APP_NAME)

"""
Application Exceptions
======================

Maps internal exceptions to HTTP status codes.

Lookup walks the exception's class hierarchy, so a subclass without its
own entry falls back to its base class mapping.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from src.export import (
    CsvExportError,
    ExportValidationError,
    JsonExportError,
    SqlExportError,
    TextExportError,
    XmlExportError,
)
from src.generation_plan import PlanningError, PlanValidationError
from src.generators import GenerationError


logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTION MAPPING
# =============================================================================

# Maps exception class names to (status_code, user_message)
EXCEPTION_MAP = {
    # Planning
    "UnresolvedReferenceError": (422, "A foreign key column does not reference a generated column."),
    "InvalidSchemaError": (422, "The column list is not valid for generation."),
    "PlanningError": (422, "Failed to plan data generation."),
    "PlanValidationError": (422, "Generation plan failed validation."),

    # Generation
    "GeneratorNotFoundError": (422, "Unknown generator assigned to a column."),
    "EmptyReferenceSetError": (422, "A foreign key has no referenced values to draw from."),
    "GeneratorFailureError": (500, "A generator failed while producing values."),
    "GenerationError": (500, "Data generation failed."),

    # Export
    "JsonExportError": (500, "Failed to export JSON."),
    "CsvExportError": (500, "Failed to export CSV."),
    "XmlExportError": (500, "Failed to export XML."),
    "TextExportError": (500, "Failed to export text."),
    "SqlExportError": (500, "Failed to export SQL."),
    "ExportValidationError": (500, "Exported files failed validation."),
}

# Base classes the application registers `global_exception_handler` for
HANDLED_EXCEPTIONS = (
    PlanningError,
    PlanValidationError,
    GenerationError,
    JsonExportError,
    CsvExportError,
    XmlExportError,
    TextExportError,
    SqlExportError,
    ExportValidationError,
)


def get_status_and_message(exc: Exception) -> tuple[int, str]:
    """Resolve (status_code, user_message) for an exception."""
    for cls in type(exc).__mro__:
        if cls.__name__ in EXCEPTION_MAP:
            return EXCEPTION_MAP[cls.__name__]
    return 500, "Internal system error."


def build_error_content(exc: Exception) -> dict:
    """Response body for an exception; includes the column when known."""
    _, user_message = get_status_and_message(exc)
    content = {
        "status": "error",
        "message": user_message,
        "detail": str(exc),
    }
    table_name = getattr(exc, "table_name", None)
    column_name = getattr(exc, "column_name", None)
    if table_name and column_name:
        content["column"] = f"{table_name}.{column_name}"
    return content


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for FastAPI.

    Catches unhandled exceptions and returns structured error response.
    """
    status_code, _ = get_status_and_message(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc)

    return JSONResponse(
        status_code=status_code,
        content=build_error_content(exc)
    )

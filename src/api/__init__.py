"""
API Module
==========

API routes and schemas.
"""

from .schemas import (
    ExtractRequest,
    ExtractResponse,
    GenerateRequest,
    GenerateResponse,
    GeneratedFiles,
    GeneratorInfo,
    GeneratorListResponse,
    SqlValidationInfo,
    DialectInfo,
    HealthResponse,
    VersionResponse,
    ErrorResponse,
)

__all__ = [
    "ExtractRequest",
    "ExtractResponse",
    "GenerateRequest",
    "GenerateResponse",
    "GeneratedFiles",
    "GeneratorInfo",
    "GeneratorListResponse",
    "SqlValidationInfo",
    "DialectInfo",
    "HealthResponse",
    "VersionResponse",
    "ErrorResponse",
]

"""
Generators Module
=================

Catalog of named value generators, the registry that binds them to a
randomness source and clock, and the SQL type compatibility matcher.

Public Interface:
-----------------
- create_default_registry(seed=None, clock=None) -> GeneratorRegistry
- GeneratorRegistry.get(name) -> GeneratorDefinition | None
- GeneratorRegistry.get_compatible_generators(sql_type) -> list[GeneratorDefinition]
"""

from .types import (
    # Data structures
    GeneratorDefinition,
    GeneratorContext,
    GeneratorCategory,
    GeneratorKind,
    normalize_generator_name,

    # Exceptions
    GenerationError,
    GeneratorNotFoundError,
    EmptyReferenceSetError,
    GeneratorFailureError,
)

from .registry import (
    GeneratorRegistry,
    create_default_registry,
    BUILTIN_GENERATORS,
)

from .compatibility import (
    match_compatible_generators,
    is_compatible,
    normalize_sql_type,
    base_type,
)

__all__ = [
    # Primary API
    "create_default_registry",
    "GeneratorRegistry",
    "match_compatible_generators",
    "is_compatible",
    "normalize_sql_type",
    "base_type",
    "normalize_generator_name",

    # Data structures
    "GeneratorDefinition",
    "GeneratorContext",
    "GeneratorCategory",
    "GeneratorKind",
    "BUILTIN_GENERATORS",

    # Exceptions
    "GenerationError",
    "GeneratorNotFoundError",
    "EmptyReferenceSetError",
    "GeneratorFailureError",
]

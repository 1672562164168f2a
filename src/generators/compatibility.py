"""
Type Compatibility Matcher
==========================

Given a declared SQL column type (e.g. "NUMBER(10)", "NVARCHAR2(255)"),
selects the generators whose `compatible_types` accept it.

Matching rules, per compatible-type entry:
    1. entry == full normalized type        ("DECIMAL(10,2)" == "DECIMAL(10,2)")
    2. entry == base type of the query      ("VARCHAR" for "VARCHAR(50)")
    3. base type of entry == base type      ("NUMBER(19,4)" for "NUMBER(10)")

All matching generators are returned in catalog order. When nothing
matches the whole catalog is returned, so an empty result never means
"no generators available".
"""

import logging
from typing import Iterable

from .types import GeneratorDefinition


logger = logging.getLogger(__name__)


# =============================================================================
# HELPERS
# =============================================================================

def normalize_sql_type(sql_type: str) -> str:
    """Uppercase and trim a SQL type string."""
    return (sql_type or "").upper().strip()


def base_type(sql_type: str) -> str:
    """Portion of a normalized type before its first parenthesis."""
    return normalize_sql_type(sql_type).split("(", 1)[0].strip()


def _entry_matches(entry: str, normalized_type: str, query_base: str) -> bool:
    compat_type = normalize_sql_type(entry)
    if compat_type == normalized_type:
        return True
    if compat_type == query_base:
        return True
    return base_type(compat_type) == query_base


def is_compatible(generator: GeneratorDefinition, sql_type: str) -> bool:
    """True if any of the generator's compatible types accepts `sql_type`."""
    normalized_type = normalize_sql_type(sql_type)
    query_base = base_type(normalized_type)
    return any(
        _entry_matches(entry, normalized_type, query_base)
        for entry in generator.compatible_types
    )


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def match_compatible_generators(
    generators: Iterable[GeneratorDefinition],
    sql_type: str
) -> list[GeneratorDefinition]:
    """
    Return the generators compatible with `sql_type`.

    Args:
        generators: Catalog entries in registration order.
        sql_type: Raw SQL type string.

    Returns:
        Compatible generators in catalog order, or the full catalog when
        none match.
    """
    catalog = list(generators)
    normalized_type = normalize_sql_type(sql_type)

    compatible = [gen for gen in catalog if is_compatible(gen, normalized_type)]

    if not compatible:
        logger.debug(
            "No specific compatible generators for %r, returning all %d generators",
            normalized_type, len(catalog)
        )
        return catalog

    logger.debug(
        "Found %d compatible generators for %r: %s",
        len(compatible), normalized_type, [gen.name for gen in compatible]
    )
    return compatible

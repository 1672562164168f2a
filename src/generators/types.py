"""
Generator Types
===============

Core data structures shared by the generator catalog, the registry,
the planner and the executor.

A generator is a named value producer. Each one declares the SQL column
types it is compatible with, a set of default options, and an async
`generate(count, options)` function returning exactly `count` values.
"""

import random
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from faker import Faker


# =============================================================================
# EXCEPTIONS
# =============================================================================

class GenerationError(Exception):
    """Base exception for data generation failures."""

    def __init__(
        self,
        message: str,
        table_name: str | None = None,
        column_name: str | None = None,
    ):
        self.table_name = table_name
        self.column_name = column_name
        super().__init__(message)

    @property
    def column_key(self) -> str | None:
        if self.table_name is None or self.column_name is None:
            return None
        return f"{self.table_name}.{self.column_name}"


class GeneratorNotFoundError(GenerationError):
    """Raised when a column's generator name matches no catalog entry."""
    pass


class EmptyReferenceSetError(GenerationError):
    """Raised when the foreign key generator has no values to draw from."""

    def __init__(
        self,
        message: str,
        reference: str | None = None,
        table_name: str | None = None,
        column_name: str | None = None,
    ):
        self.reference = reference
        super().__init__(message, table_name=table_name, column_name=column_name)


class GeneratorFailureError(GenerationError):
    """
    Raised when a generator's `generate` call fails for any other reason.
    The original exception is kept in `original_error` and `__cause__`.
    """

    def __init__(
        self,
        message: str,
        original_error: BaseException,
        table_name: str | None = None,
        column_name: str | None = None,
    ):
        self.original_error = original_error
        super().__init__(message, table_name=table_name, column_name=column_name)


# =============================================================================
# ENUMS
# =============================================================================

class GeneratorCategory(str, Enum):
    """Closed set of generator categories."""
    ID = "id"
    NAME = "name"
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    CUSTOM = "custom"


class GeneratorKind(str, Enum):
    """
    Closed set of generators known to the catalog.

    Values are the registry keys: the display name lowercased with the
    whitespace removed, except where the catalog uses a shorter key.
    """
    UUID = "uuid"
    FIRST_NAME = "firstname"
    LAST_NAME = "lastname"
    EMAIL = "email"
    TIMESTAMP = "timestamp"
    SEQUENTIAL_NUMBER = "sequentialnumber"
    MONEY = "money"
    PHONE_NUMBER = "phonenumber"
    COMPANY = "company"
    ADDRESS = "address"
    USERNAME = "username"
    PASSWORD = "password"
    PRODUCT_CODE = "productcode"
    BOOLEAN = "boolean"
    FOREIGN_KEY = "foreignkey"
    HUMIDITY = "humidity"
    TEMPERATURE = "temperature"
    CELSIUS_STRING = "celsiusstring"
    FAHRENHEIT_STRING = "fahrenheitstring"

    @classmethod
    def from_name(cls, name: str | None) -> "GeneratorKind | None":
        """
        Resolve a free-text generator name ("Sequential Number",
        "sequentialnumber", "FOREIGN KEY") into a kind.

        Display names are resolved through the registry; this only
        accepts strings that normalize to a registry key.
        """
        if not name:
            return None
        try:
            return cls(normalize_generator_name(name))
        except ValueError:
            return None


# =============================================================================
# CONTEXT
# =============================================================================

Clock = Callable[[], datetime]


@dataclass
class GeneratorContext:
    """
    Randomness source and clock shared by every generator of a registry.
    """
    faker: Faker
    rng: random.Random
    clock: Clock


ProduceFn = Callable[[int, dict[str, Any], GeneratorContext], list[Any]]


# =============================================================================
# GENERATOR DEFINITION
# =============================================================================

@dataclass
class GeneratorDefinition:
    """
    One catalog entry.

    `produce` does the actual work and receives fully merged options.
    The registry binds `context` when the definition is registered.
    """
    kind: GeneratorKind
    name: str
    description: str
    category: GeneratorCategory
    compatible_types: tuple[str, ...]
    produce: ProduceFn = field(repr=False)
    default_options: dict[str, Any] = field(default_factory=dict)
    context: GeneratorContext | None = field(default=None, repr=False, compare=False)

    @property
    def key(self) -> str:
        return self.kind.value

    @property
    def is_foreign_key(self) -> bool:
        return self.kind is GeneratorKind.FOREIGN_KEY

    def merge_options(self, options: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Merge caller options over the defaults.

        Keys the generator does not declare are ignored, and a value of
        None leaves the default in place.
        """
        merged = dict(self.default_options)
        for key, value in (options or {}).items():
            if key in merged and value is not None:
                merged[key] = value
        return merged

    async def generate(
        self,
        count: int,
        options: dict[str, Any] | None = None
    ) -> list[Any]:
        """
        Produce exactly `count` values.

        Args:
            count: Number of values; zero or negative yields an empty list.
            options: Overrides for `default_options`.

        Returns:
            List of generated values.
        """
        if self.context is None:
            raise RuntimeError(
                f"Generator '{self.name}' is not bound to a registry."
            )
        if count <= 0:
            return []
        return self.produce(count, self.merge_options(options), self.context)


# =============================================================================
# HELPERS
# =============================================================================

def normalize_generator_name(name: str) -> str:
    """Lowercase a generator name and drop all whitespace."""
    return "".join(name.split()).lower()

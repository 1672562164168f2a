"""
Generator Registry
==================

An explicitly constructed catalog of generators. The registry owns the
randomness source (Faker + random.Random) and the clock that every
registered generator shares, so a registry built with a seed and a
frozen clock produces reproducible output.

Usage:
------
    registry = create_default_registry(seed=42)
    gen = registry.get("Sequential Number")
    values = await gen.generate(5, {"start_at": 3, "step": 2})
"""

import dataclasses
import random
from datetime import datetime, timezone
from typing import Iterable

from faker import Faker

from .basic import (
    ADDRESS_GENERATOR,
    BOOLEAN_GENERATOR,
    COMPANY_GENERATOR,
    EMAIL_GENERATOR,
    FIRST_NAME_GENERATOR,
    FOREIGN_KEY_GENERATOR,
    LAST_NAME_GENERATOR,
    MONEY_GENERATOR,
    PASSWORD_GENERATOR,
    PHONE_NUMBER_GENERATOR,
    PRODUCT_CODE_GENERATOR,
    SEQUENTIAL_NUMBER_GENERATOR,
    TIMESTAMP_GENERATOR,
    USERNAME_GENERATOR,
    UUID_GENERATOR,
)
from .compatibility import match_compatible_generators
from .environmental import (
    CELSIUS_STRING_GENERATOR,
    FAHRENHEIT_STRING_GENERATOR,
    HUMIDITY_GENERATOR,
    TEMPERATURE_GENERATOR,
)
from .types import (
    Clock,
    GeneratorContext,
    GeneratorDefinition,
    GeneratorKind,
    normalize_generator_name,
)


# =============================================================================
# CONSTANTS
# =============================================================================

# Registration order is the order compatible generators are offered in
BUILTIN_GENERATORS: tuple[GeneratorDefinition, ...] = (
    UUID_GENERATOR,
    FIRST_NAME_GENERATOR,
    LAST_NAME_GENERATOR,
    EMAIL_GENERATOR,
    TIMESTAMP_GENERATOR,
    SEQUENTIAL_NUMBER_GENERATOR,
    MONEY_GENERATOR,
    PHONE_NUMBER_GENERATOR,
    COMPANY_GENERATOR,
    ADDRESS_GENERATOR,
    USERNAME_GENERATOR,
    PASSWORD_GENERATOR,
    PRODUCT_CODE_GENERATOR,
    BOOLEAN_GENERATOR,
    FOREIGN_KEY_GENERATOR,
    HUMIDITY_GENERATOR,
    TEMPERATURE_GENERATOR,
    CELSIUS_STRING_GENERATOR,
    FAHRENHEIT_STRING_GENERATOR,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# REGISTRY
# =============================================================================

class GeneratorRegistry:
    """Catalog of generators bound to one randomness source and clock."""

    def __init__(
        self,
        generators: Iterable[GeneratorDefinition] = (),
        seed: int | None = None,
        clock: Clock | None = None,
        locale: str | None = None,
    ):
        faker = Faker(locale) if locale else Faker()
        if seed is not None:
            faker.seed_instance(seed)

        self.context = GeneratorContext(
            faker=faker,
            rng=random.Random(seed),
            clock=clock or utc_now,
        )
        self._generators: dict[str, GeneratorDefinition] = {}

        for generator in generators:
            self.register(generator)

    def __len__(self) -> int:
        return len(self._generators)

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def register(self, generator: GeneratorDefinition) -> GeneratorDefinition:
        """
        Register a generator under its key, binding it to this registry's
        context. Re-registering a key replaces the earlier entry.
        """
        bound = dataclasses.replace(generator, context=self.context)
        self._generators[bound.key] = bound
        return bound

    def get(self, name: str | None) -> GeneratorDefinition | None:
        """
        Look up a generator by registry key or display name.

        Whitespace and case are ignored, so "Sequential Number",
        "sequentialnumber" and "SEQUENTIAL NUMBER" all resolve.
        """
        if not name:
            return None
        normalized = normalize_generator_name(name)
        if normalized in self._generators:
            return self._generators[normalized]
        for generator in self._generators.values():
            if normalize_generator_name(generator.name) == normalized:
                return generator
        return None

    def resolve_kind(self, name: str | None) -> GeneratorKind | None:
        """Resolve a free-text generator name into its `GeneratorKind`."""
        generator = self.get(name)
        return generator.kind if generator else None

    def is_foreign_key(self, name: str | None) -> bool:
        return self.resolve_kind(name) is GeneratorKind.FOREIGN_KEY

    def get_all(self) -> list[GeneratorDefinition]:
        """All generators in registration order."""
        return list(self._generators.values())

    def get_compatible_generators(self, sql_type: str) -> list[GeneratorDefinition]:
        """
        Generators compatible with `sql_type`, in registration order.
        Returns the full catalog when nothing matches.
        """
        return match_compatible_generators(self._generators.values(), sql_type)


# =============================================================================
# PUBLIC INTERFACE
# =============================================================================

def create_default_registry(
    seed: int | None = None,
    clock: Clock | None = None,
    locale: str | None = None,
) -> GeneratorRegistry:
    """
    Build a registry holding the full built-in catalog.

    Args:
        seed: Optional seed for Faker and the numeric rng.
        clock: Optional time source; defaults to timezone-aware UTC now.
        locale: Optional Faker locale (e.g. "en_US").

    Returns:
        A new GeneratorRegistry.
    """
    return GeneratorRegistry(BUILTIN_GENERATORS, seed=seed, clock=clock, locale=locale)

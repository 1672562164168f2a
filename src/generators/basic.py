"""
Basic Generators
================

Identifier, personal, contact, numeric, temporal and custom-format
generators. Realistic text values come from Faker; numeric draws come
from the registry's `random.Random` instance so seeded registries are
reproducible.

Each generator is declared as an unbound `GeneratorDefinition`. The
registry binds a `GeneratorContext` (Faker, rng, clock) on registration.
"""

import string
from datetime import datetime, timedelta, timezone
from typing import Any

from .types import (
    EmptyReferenceSetError,
    GeneratorCategory,
    GeneratorContext,
    GeneratorDefinition,
    GeneratorKind,
)


# =============================================================================
# COMPATIBLE TYPE LISTS
# =============================================================================

STRING_TYPES = (
    "CHAR", "VARCHAR", "VARCHAR2", "TEXT", "STRING",
    "NCHAR", "NVARCHAR", "NVARCHAR2", "NTEXT",
    "CHARACTER VARYING",
)

WIDE_STRING_TYPES = (
    "VARCHAR", "VARCHAR2", "TEXT", "NVARCHAR", "NVARCHAR2",
    "CHARACTER VARYING", "STRING",
)

DEFAULT_TIMESTAMP_WINDOW = timedelta(days=365)


# =============================================================================
# HELPERS
# =============================================================================

def _apply_casing(value: str, casing: str | None) -> str:
    if casing == "upper":
        return value.upper()
    if casing == "lower":
        return value.lower()
    return value


def _as_datetime(value: Any) -> datetime:
    """Accept datetimes or ISO-8601 strings; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _to_iso(value: datetime) -> str:
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _number_text(value: Any) -> str:
    # 3.0 renders as "3" so float options do not leak a trailing ".0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =============================================================================
# PRODUCERS
# =============================================================================

def _uuids(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    return [ctx.faker.uuid4() for _ in range(count)]


def _first_names(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    gender = options["gender"]
    names = []
    for _ in range(count):
        if gender == "male":
            name = ctx.faker.first_name_male()
        elif gender == "female":
            name = ctx.faker.first_name_female()
        else:
            name = ctx.faker.first_name()
        names.append(_apply_casing(name, options["casing"]))
    return names


def _last_names(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    return [ctx.faker.last_name() for _ in range(count)]


def _emails(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    return [ctx.faker.email() for _ in range(count)]


def _timestamps(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    now = ctx.clock()
    max_date = _as_datetime(options["max_date"] if options["max_date"] is not None else now)
    if options["min_date"] is not None:
        min_date = _as_datetime(options["min_date"])
    else:
        min_date = _as_datetime(now) - DEFAULT_TIMESTAMP_WINDOW

    span = max_date - min_date
    return [_to_iso(min_date + span * ctx.rng.random()) for _ in range(count)]


def _sequential_numbers(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    start_at = options["start_at"]
    step = options["step"]
    pad_to_length = options["pad_to_length"]
    prefix = options["prefix"] or ""
    suffix = options["suffix"] or ""

    values = []
    for i in range(count):
        text = _number_text(start_at + i * step)
        if pad_to_length > 0:
            text = text.rjust(pad_to_length, "0")
        values.append(f"{prefix}{text}{suffix}")
    return values


def _money_amounts(count: int, options: dict, ctx: GeneratorContext) -> list[float]:
    low = options["min_amount"]
    high = options["max_amount"]
    places = int(options["decimal_places"])
    return [round(ctx.rng.uniform(low, high), places) for _ in range(count)]


def _phone_numbers(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    return [ctx.faker.phone_number() for _ in range(count)]


def _companies(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    return [ctx.faker.company() for _ in range(count)]


def _addresses(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    return [ctx.faker.street_address() for _ in range(count)]


def _usernames(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    return [ctx.faker.user_name() for _ in range(count)]


def _passwords(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    length = max(int(options["password_length"]), 0)
    memorable = bool(options["password_memorability"])

    # Faker needs one slot per required character class
    if memorable or length < 4:
        return [
            "".join(ctx.rng.choice(string.ascii_lowercase) for _ in range(length))
            for _ in range(count)
        ]
    return [ctx.faker.password(length=length) for _ in range(count)]


def _product_codes(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    template = options["format"] or "AAA-99999"
    casing = options["casing"]
    prefix = options["prefix"] or ""
    suffix = options["suffix"] or ""

    if casing == "upper":
        letters = string.ascii_uppercase
    elif casing == "lower":
        letters = string.ascii_lowercase
    else:
        letters = string.ascii_letters

    codes = []
    for _ in range(count):
        chars = []
        for char in template:
            if char == "A":
                chars.append(ctx.rng.choice(letters))
            elif char == "9":
                chars.append(ctx.rng.choice(string.digits))
            else:
                chars.append(char)
        codes.append(f"{prefix}{''.join(chars)}{suffix}")
    return codes


def _booleans(count: int, options: dict, ctx: GeneratorContext) -> list[bool]:
    weight = options["true_weight"]
    return [ctx.rng.random() < weight for _ in range(count)]


def _foreign_keys(count: int, options: dict, ctx: GeneratorContext) -> list[Any]:
    values = options["referenced_values"]
    reference = f"{options['referenced_table']}.{options['referenced_column']}"
    if not values:
        raise EmptyReferenceSetError(
            f"No referenced values available for foreign key from {reference}",
            reference=reference,
        )
    values = list(values)
    return [ctx.rng.choice(values) for _ in range(count)]


# =============================================================================
# DEFINITIONS
# =============================================================================

UUID_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.UUID,
    name="UUID",
    description="Generates RFC4122 version 4 UUIDs",
    category=GeneratorCategory.ID,
    compatible_types=(
        "CHAR", "VARCHAR", "VARCHAR2", "TEXT", "STRING",
        "UUID", "UNIQUEIDENTIFIER", "CHARACTER VARYING",
    ),
    produce=_uuids,
)

FIRST_NAME_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.FIRST_NAME,
    name="First Name",
    description="Generates realistic first names with optional gender filter",
    category=GeneratorCategory.NAME,
    compatible_types=STRING_TYPES,
    produce=_first_names,
    default_options={"gender": None, "casing": "mixed"},
)

LAST_NAME_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.LAST_NAME,
    name="Last Name",
    description="Generates realistic last names",
    category=GeneratorCategory.NAME,
    compatible_types=STRING_TYPES,
    produce=_last_names,
)

EMAIL_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.EMAIL,
    name="Email",
    description="Generates realistic email addresses",
    category=GeneratorCategory.TEXT,
    compatible_types=WIDE_STRING_TYPES,
    produce=_emails,
)

TIMESTAMP_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.TIMESTAMP,
    name="Timestamp",
    description="Generates timestamps within a configurable date range",
    category=GeneratorCategory.DATE,
    compatible_types=(
        "TIMESTAMP", "DATETIME", "DATETIME2",
        "TIMESTAMP WITH TIME ZONE", "TIMESTAMP WITH LOCAL TIME ZONE",
    ),
    produce=_timestamps,
    # None resolves against the registry clock: one year ago .. now
    default_options={"min_date": None, "max_date": None},
)

SEQUENTIAL_NUMBER_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.SEQUENTIAL_NUMBER,
    name="Sequential Number",
    description="Generates sequential numbers with configurable start and step",
    category=GeneratorCategory.NUMBER,
    compatible_types=(
        "NUMBER", "INT", "INTEGER", "BIGINT", "DECIMAL", "NUMERIC",
        "NUMBER(10)", "NUMBER(19,4)", "DECIMAL(10,2)",
    ),
    produce=_sequential_numbers,
    default_options={
        "start_at": 1,
        "step": 1,
        "pad_to_length": 0,
        "prefix": "",
        "suffix": "",
    },
)

MONEY_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.MONEY,
    name="Money Amount",
    description="Generates realistic money amounts with configurable range",
    category=GeneratorCategory.NUMBER,
    compatible_types=(
        "NUMBER", "DECIMAL", "NUMERIC", "MONEY",
        "NUMBER(19,4)", "DECIMAL(10,2)", "NUMERIC(19,4)",
    ),
    produce=_money_amounts,
    default_options={
        "min_amount": 10,
        "max_amount": 1000,
        "decimal_places": 2,
        "currency": "USD",
    },
)

PHONE_NUMBER_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.PHONE_NUMBER,
    name="Phone Number",
    description="Generates formatted phone numbers",
    category=GeneratorCategory.TEXT,
    compatible_types=(
        "VARCHAR", "VARCHAR2", "CHAR", "TEXT",
        "CHARACTER VARYING", "STRING",
    ),
    produce=_phone_numbers,
)

COMPANY_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.COMPANY,
    name="Company Name",
    description="Generates realistic company names",
    category=GeneratorCategory.TEXT,
    compatible_types=WIDE_STRING_TYPES,
    produce=_companies,
)

ADDRESS_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.ADDRESS,
    name="Street Address",
    description="Generates realistic street addresses",
    category=GeneratorCategory.TEXT,
    compatible_types=WIDE_STRING_TYPES,
    produce=_addresses,
)

USERNAME_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.USERNAME,
    name="Username",
    description="Generates usernames based on name patterns",
    category=GeneratorCategory.TEXT,
    compatible_types=WIDE_STRING_TYPES,
    produce=_usernames,
)

PASSWORD_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.PASSWORD,
    name="Password",
    description="Generates secure passwords with configurable length and memorability",
    category=GeneratorCategory.TEXT,
    compatible_types=WIDE_STRING_TYPES,
    produce=_passwords,
    default_options={"password_length": 12, "password_memorability": True},
)

PRODUCT_CODE_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.PRODUCT_CODE,
    name="Product Code",
    description="Generates product codes with configurable format",
    category=GeneratorCategory.TEXT,
    compatible_types=WIDE_STRING_TYPES,
    produce=_product_codes,
    # A = letter, 9 = digit
    default_options={
        "format": "AAA-99999",
        "prefix": "",
        "suffix": "",
        "casing": "upper",
    },
)

BOOLEAN_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.BOOLEAN,
    name="Boolean",
    description="Generates true/false values with configurable distribution",
    category=GeneratorCategory.TEXT,
    compatible_types=(
        "BOOLEAN", "BOOL", "BIT", "NUMBER(1)", "TINYINT",
        "CHAR(1)", "VARCHAR2(1)", "VARCHAR(1)", "CHAR(1 BYTE)",
        "NUMBER(1,0)",
    ),
    produce=_booleans,
    default_options={"true_weight": 0.5},
)

FOREIGN_KEY_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.FOREIGN_KEY,
    name="Foreign Key",
    description="References values from another column",
    category=GeneratorCategory.ID,
    compatible_types=(
        "NUMBER", "INT", "INTEGER", "BIGINT", "UUID", "VARCHAR",
        "VARCHAR2", "CHAR", "TEXT", "STRING",
    ),
    produce=_foreign_keys,
    default_options={
        "referenced_table": "",
        "referenced_column": "",
        "referenced_values": [],
    },
)

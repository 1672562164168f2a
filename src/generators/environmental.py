"""
Environmental Generators
========================

Simulated sensor readings (temperature, humidity) with optional
time-of-day and seasonal variation.

The variation terms read the registry clock at generation time, so the
output depends on *when* generation runs. Tests freeze the clock through
`GeneratorRegistry(clock=...)`.
"""

import math

from .types import (
    GeneratorCategory,
    GeneratorContext,
    GeneratorDefinition,
    GeneratorKind,
)


# =============================================================================
# CONSTANTS
# =============================================================================

NUMERIC_SENSOR_TYPES = (
    "NUMBER", "DECIMAL", "NUMERIC", "FLOAT", "DOUBLE",
    "NUMBER(5,2)", "DECIMAL(5,2)", "NUMERIC(5,2)",
)

STRING_SENSOR_TYPES = (
    "CHAR", "VARCHAR", "VARCHAR2", "TEXT", "STRING",
    "CHARACTER VARYING",
)

# Temperature: warmest around 14:00 and in July (month index 6)
TEMPERATURE_PEAK_HOUR = 14
TEMPERATURE_PEAK_MONTH = 6
TEMPERATURE_DAILY_SWING_C = 8
TEMPERATURE_SEASONAL_SWING_C = 15

# Humidity: highest around 06:00 and in February (month index 1)
HUMIDITY_PEAK_HOUR = 6
HUMIDITY_PEAK_MONTH = 1
HUMIDITY_DAILY_SWING = 10
HUMIDITY_SEASONAL_SWING = 5

# Converts a Celsius *difference* to a Fahrenheit difference
CELSIUS_TO_FAHRENHEIT_DELTA = 9 / 5


# =============================================================================
# HELPERS
# =============================================================================

def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _varied_reading(
    ctx: GeneratorContext,
    low: float,
    high: float,
    *,
    time_variation: bool,
    seasonal_variation: bool,
    peak_hour: int,
    peak_month: int,
    daily_swing: float,
    seasonal_swing: float,
) -> float:
    """
    Draw a base value in [low, high], perturb it by the time-of-day and
    seasonal sine terms, and clamp it back into [low, high].
    """
    value = low + ctx.rng.random() * (high - low)

    if time_variation or seasonal_variation:
        now = ctx.clock()
        if time_variation:
            value += math.sin((now.hour - peak_hour) * math.pi / 12) * daily_swing
        if seasonal_variation:
            # 0-based month index, January = 0
            month_index = now.month - 1
            value += math.sin((month_index - peak_month) * math.pi / 6) * seasonal_swing

    return _clamp(value, low, high)


def _temperature_reading(
    options: dict,
    ctx: GeneratorContext,
    daily_swing: float,
    seasonal_swing: float,
) -> float:
    return _varied_reading(
        ctx,
        options["min_temperature"],
        options["max_temperature"],
        time_variation=bool(options["include_time_variation"]),
        seasonal_variation=bool(options["include_seasonal_variation"]),
        peak_hour=TEMPERATURE_PEAK_HOUR,
        peak_month=TEMPERATURE_PEAK_MONTH,
        daily_swing=daily_swing,
        seasonal_swing=seasonal_swing,
    )


# =============================================================================
# PRODUCERS
# =============================================================================

def _humidity(count: int, options: dict, ctx: GeneratorContext) -> list[float]:
    return [
        _varied_reading(
            ctx,
            options["min_humidity"],
            options["max_humidity"],
            time_variation=bool(options["include_time_variation"]),
            seasonal_variation=bool(options["include_seasonal_variation"]),
            peak_hour=HUMIDITY_PEAK_HOUR,
            peak_month=HUMIDITY_PEAK_MONTH,
            daily_swing=HUMIDITY_DAILY_SWING,
            seasonal_swing=HUMIDITY_SEASONAL_SWING,
        )
        for _ in range(count)
    ]


def _temperature(count: int, options: dict, ctx: GeneratorContext) -> list[float]:
    readings = []
    for _ in range(count):
        celsius = _temperature_reading(
            options, ctx, TEMPERATURE_DAILY_SWING_C, TEMPERATURE_SEASONAL_SWING_C
        )
        if options["use_celsius"]:
            readings.append(celsius)
        else:
            readings.append(celsius * 9 / 5 + 32)
    return readings


def _celsius_strings(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    places = int(options["decimal_places"])
    return [
        f"{_temperature_reading(options, ctx, TEMPERATURE_DAILY_SWING_C, TEMPERATURE_SEASONAL_SWING_C):.{places}f}°C"
        for _ in range(count)
    ]


def _fahrenheit_strings(count: int, options: dict, ctx: GeneratorContext) -> list[str]:
    places = int(options["decimal_places"])
    daily = TEMPERATURE_DAILY_SWING_C * CELSIUS_TO_FAHRENHEIT_DELTA
    seasonal = TEMPERATURE_SEASONAL_SWING_C * CELSIUS_TO_FAHRENHEIT_DELTA
    return [
        f"{_temperature_reading(options, ctx, daily, seasonal):.{places}f}°F"
        for _ in range(count)
    ]


# =============================================================================
# DEFINITIONS
# =============================================================================

HUMIDITY_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.HUMIDITY,
    name="Humidity",
    description="Generates realistic humidity values with daily and seasonal variations",
    category=GeneratorCategory.NUMBER,
    compatible_types=NUMERIC_SENSOR_TYPES,
    produce=_humidity,
    default_options={
        "min_humidity": 30,
        "max_humidity": 70,
        "include_time_variation": True,
        "include_seasonal_variation": True,
    },
)

TEMPERATURE_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.TEMPERATURE,
    name="Temperature",
    description="Generates realistic temperature values with daily and seasonal variations",
    category=GeneratorCategory.NUMBER,
    compatible_types=NUMERIC_SENSOR_TYPES,
    produce=_temperature,
    default_options={
        "min_temperature": -10,
        "max_temperature": 35,
        "include_time_variation": True,
        "include_seasonal_variation": True,
        "use_celsius": True,
    },
)

CELSIUS_STRING_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.CELSIUS_STRING,
    name="Temperature (Celsius String)",
    description="Generates temperature values as strings with °C suffix",
    category=GeneratorCategory.TEXT,
    compatible_types=STRING_SENSOR_TYPES,
    produce=_celsius_strings,
    default_options={
        "min_temperature": -10,
        "max_temperature": 35,
        "include_time_variation": True,
        "include_seasonal_variation": True,
        "decimal_places": 1,
    },
)

FAHRENHEIT_STRING_GENERATOR = GeneratorDefinition(
    kind=GeneratorKind.FAHRENHEIT_STRING,
    name="Temperature (Fahrenheit String)",
    description="Generates temperature values as strings with °F suffix",
    category=GeneratorCategory.TEXT,
    compatible_types=STRING_SENSOR_TYPES,
    produce=_fahrenheit_strings,
    default_options={
        "min_temperature": 14,
        "max_temperature": 95,
        "include_time_variation": True,
        "include_seasonal_variation": True,
        "decimal_places": 1,
    },
)

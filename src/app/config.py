"""
Application Configuration
=========================

Central configuration for the API. Values come from environment
variables (a `.env` file is loaded by `main.py` before this module is
imported).
"""

import os
from pathlib import Path


# =============================================================================
# VERSION
# =============================================================================

VERSION = "1.0.0"
APP_NAME = "SQL Schema Synthetic Data Generator"


# =============================================================================
# OUTPUT DIRECTORY
# =============================================================================

# Default output directory (can be overridden via environment variable)
OUTPUT_DIR = os.environ.get(
    "SDG_OUTPUT_DIR",
    str(Path(__file__).parent.parent.parent / "output")
)


def get_output_dir() -> str:
    """
    Get the output directory path, creating it if it doesn't exist.

    Returns:
        Absolute path to output directory.
    """
    output_path = Path(OUTPUT_DIR)
    output_path.mkdir(parents=True, exist_ok=True)
    return str(output_path.resolve())


# =============================================================================
# GENERATION
# =============================================================================

def _int_env(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# Row count used when a request does not give a usable one
DEFAULT_ROW_COUNT = max(1, _int_env("SDG_DEFAULT_ROW_COUNT", 10))

# Seed for the shared generator registry; unset means non-reproducible output
SEED = _int_env("SDG_SEED", None)


# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL = os.environ.get("SDG_LOG_LEVEL", "INFO").upper()

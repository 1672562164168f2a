"""
App Module
==========

FastAPI application initialization.
"""

from .config import VERSION, APP_NAME, OUTPUT_DIR, DEFAULT_ROW_COUNT, SEED, get_output_dir
from .exceptions import (
    EXCEPTION_MAP,
    build_error_content,
    get_status_and_message,
    global_exception_handler,
)
from .logging_config import configure_logging

__all__ = [
    "VERSION",
    "APP_NAME",
    "OUTPUT_DIR",
    "DEFAULT_ROW_COUNT",
    "SEED",
    "get_output_dir",
    "EXCEPTION_MAP",
    "build_error_content",
    "get_status_and_message",
    "global_exception_handler",
    "configure_logging",
]

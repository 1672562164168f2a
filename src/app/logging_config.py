"""
Logging Configuration
=====================

Configures the root logger once at application start. Library modules
only create `logging.getLogger(__name__)` loggers and never add handlers.
"""

import logging

from .config import LOG_LEVEL


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name (e.g. "DEBUG"); defaults to SDG_LOG_LEVEL.
    """
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
    )

"""Process-wide logging setup for applications embedding the engine.

The library itself only creates module loggers; it never configures
handlers on import.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from event_footprint.config.settings import get_settings

_LOGGER_INITIALIZED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Configure process-wide logging once."""
    global _LOGGER_INITIALIZED
    if _LOGGER_INITIALIZED:
        return

    resolved_level = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=resolved_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )
    _LOGGER_INITIALIZED = True

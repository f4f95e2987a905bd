# ==============================================================================
# LOGGING - Application Logging Configuration
# ==============================================================================
# Configures the package logger from LOG_LEVEL / LOG_FORMAT settings
# ==============================================================================

from __future__ import annotations

import logging
import sys
from typing import Optional

from realty_admin.core.settings import settings

PACKAGE_LOGGER = "realty_admin"


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Setup and configure the package logger.

    Every module logs through ``logging.getLogger(__name__)``, so handlers
    attached here apply to the whole ``realty_admin`` tree.

    Args:
        level: Log level (defaults to settings.LOG_LEVEL)
        format_string: Custom format string (defaults to settings.LOG_FORMAT)
        log_file: Optional file to write logs to

    Returns:
        Configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level = level or settings.LOG_LEVEL
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(format_string or settings.LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

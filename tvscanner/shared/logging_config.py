"""
Standardized Logging Configuration
===================================

Logging setup for applications embedding the scanner client.

Library modules never configure sinks themselves; they log through
``context_logger``, which tags every record with ``client_name``.
"""

import sys
from typing import Optional

from loguru import logger

CLIENT_NAME = "tvscanner"

# Bound logger used by all library modules
context_logger = logger.bind(client_name=CLIENT_NAME)


def setup_logging(
    service_name: str = CLIENT_NAME,
    log_level: Optional[str] = None,
    log_dir: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> "logger":
    """
    Configure loguru sinks for a process using the scanner.

    Args:
        service_name: Name shown in the log prefix and used for file names
        log_level: Console log level; settings.log_level when None
        log_dir: Directory for log files; no file sinks when None
        rotation: When log files are rotated
        retention: How long rotated log files are kept

    Returns:
        The configured logger
    """
    if log_level is None:
        from ..config.settings import settings
        log_level = settings.log_level

    logger.remove()

    console_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        f"<cyan>{service_name.upper()}</cyan> | "
        "<level>{message}</level>"
    )

    file_format = (
        "{time:YYYY-MM-DD HH:mm:ss} | "
        "{level: <8} | "
        f"{service_name.upper()} | "
        "{extra} | "
        "{message}"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=log_level,
        colorize=True,
    )

    if log_dir:
        # File sink always gets DEBUG
        logger.add(
            f"{log_dir}/{service_name}_{{time}}.log",
            format=file_format,
            level="DEBUG",
            rotation=rotation,
            retention=retention,
            compression="gz",
        )

        logger.add(
            f"{log_dir}/{service_name}_errors_{{time}}.log",
            format=file_format,
            level="ERROR",
            rotation=rotation,
            retention=retention,
            compression="gz",
        )

    return logger

"""
Logging configuration

All astrosky modules obtain their logger from here so output stays
consistent. The library never installs handlers on import; applications
call configure_logging() once if they want console/file output.

Usage:
    from astrosky.logging_config import get_logger

    logger = get_logger(__name__)
    logger.info("Loaded 8912 stars")
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logging.getLogger("astrosky").addHandler(logging.NullHandler())


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configure logging for an application using astrosky.

    Args:
        level: logging level (e.g. logging.DEBUG)
        log_file: optional path of a log file; console only when None
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, typically get_logger(__name__)."""
    return logging.getLogger(name)

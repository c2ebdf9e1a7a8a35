"""Logging for the persistence layer.

Modules log through ``get_logger(__name__)``, so every record lands under the
``opensearch_persistence`` logger. The package stays silent until an
application calls ``setup_logging`` or configures logging itself.
"""

import logging
import sys
from enum import Enum
from typing import TextIO

PACKAGE_LOGGER = "opensearch_persistence"
DEFAULT_FORMAT = "%(asctime)s  %(name)s  %(levelname)s  %(message)s"


class LogLevel(Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def setup_logging(
    level: str | LogLevel = LogLevel.INFO,
    format_string: str | None = None,
    include_timestamp: bool = True,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Send the package's log records to a stream.

    Only the package logger is touched, the root logger is left to the
    application. Calling it again replaces the handler instead of adding one.

    Args:
        level: Logging level as string or LogLevel enum; request timings are logged at DEBUG
        format_string: Custom format string (optional)
        include_timestamp: Whether to include timestamps in logs
        stream: Where to write, stdout by default

    Returns:
        The package logger
    """
    level_str = level.value if isinstance(level, LogLevel) else level.upper()
    numeric_level = getattr(logging, level_str, logging.INFO)

    if format_string is None:
        format_string = DEFAULT_FORMAT if include_timestamp else "%(name)s  %(levelname)s  %(message)s"

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_opensearch_persistence", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(format_string, datefmt="%Y-%m-%d %H:%M:%S"))
    handler._opensearch_persistence = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

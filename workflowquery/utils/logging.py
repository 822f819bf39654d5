"""
Logging utilities for workflowquery.

The package never installs handlers on its own. Library modules log through
``get_logger(__name__)``; applications that want that output on a stream or
in a file call ``setup_logger`` or ``configure_logging``.
"""

import logging
import sys
from typing import Dict, List, Optional


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_loggers: Dict[str, logging.Logger] = {}

# Handlers installed by setup_logger, per logger name
_installed: Dict[str, List[logging.Handler]] = {}


def resolve_level(level: str) -> int:
    """
    Map a level name to its logging constant.

    Raises:
        ValueError: If level is not one of LOG_LEVELS
    """
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(
            f"Unknown log level '{level}', expected one of {', '.join(LOG_LEVELS)}"
        )
    return logging.getLevelName(name)


def setup_logger(
    name: str = "workflowquery",
    level: str = "WARNING",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Attach a stderr handler (and optionally a file handler) to a logger.

    Calling it again for the same name swaps out the handlers from the
    previous call; handlers added by anyone else are left alone.

    Args:
        name: Logger name
        level: Log level name, one of LOG_LEVELS
        format_string: Custom format string
        log_file: Optional file path for logging

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level))

    for handler in _installed.pop(name, []):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=DEFAULT_DATE_FORMAT,
    )

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    _installed[name] = handlers
    _loggers[name] = logger
    return logger


def get_logger(name: str = "workflowquery") -> logging.Logger:
    """
    Get a logger by name.

    Loggers are returned as-is, without handlers, so records propagate to
    whatever the application configured.
    """
    if name not in _loggers:
        _loggers[name] = logging.getLogger(name)
    return _loggers[name]


def configure_logging(settings) -> logging.Logger:
    """Configure the package logger from a Settings object."""
    return setup_logger(
        "workflowquery",
        level=settings.log_level,
        format_string=settings.log_format,
    )

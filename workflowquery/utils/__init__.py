"""
Utility functions for workflowquery.
"""

from .validation import (
    validate_attribute,
    validate_comparison_operator,
    validate_logical_operator,
    validate_time_range,
    validate_values,
)
from .timefmt import format_rfc3339
from .logging import (
    LOG_LEVELS,
    setup_logger,
    get_logger,
    configure_logging,
    resolve_level,
)

__all__ = [
    "validate_attribute",
    "validate_comparison_operator",
    "validate_logical_operator",
    "validate_time_range",
    "validate_values",
    "format_rfc3339",
    "setup_logger",
    "get_logger",
    "configure_logging",
    "LOG_LEVELS",
    "resolve_level",
]

"""
workflowquery - build filter strings for workflow visibility queries.

Example:
    >>> from datetime import datetime, timedelta, timezone
    >>> from workflowquery import ClauseBuilder, SearchAttribute, LogicalOperator
    >>>
    >>> end = datetime(2024, 12, 16, 20, 52, 35, tzinfo=timezone.utc)
    >>> q = (
    ...     ClauseBuilder()
    ...     .start_clause(SearchAttribute.WORKFLOW_TYPE, "=", "TestMe")
    ...     .between(SearchAttribute.START_TIME, end - timedelta(minutes=5), end,
    ...              LogicalOperator.AND)
    ... )
    >>> q.encode()
    "WorkflowType='TestMe' AND (StartTime BETWEEN '2024-12-16T20:47:35Z' AND '2024-12-16T20:52:35Z')"
"""

from .core import (
    # Builder
    ClauseBuilder,
    # Vocabulary
    DELIM_OPEN_PARENTHESES,
    DELIM_CLOSE_PARENTHESES,
    LogicalOperator,
    ComparisonOperator,
    SearchAttribute,
    ExecutionStatus,
    # Exceptions
    WorkflowQueryError,
    ValidationError,
    ConfigurationError,
)
from .config import Settings, load_config, get_settings, set_settings
from .utils import format_rfc3339

__version__ = "0.1.0"

__all__ = [
    # Builder
    "ClauseBuilder",
    # Vocabulary
    "DELIM_OPEN_PARENTHESES",
    "DELIM_CLOSE_PARENTHESES",
    "LogicalOperator",
    "ComparisonOperator",
    "SearchAttribute",
    "ExecutionStatus",
    # Exceptions
    "WorkflowQueryError",
    "ValidationError",
    "ConfigurationError",
    # Config
    "Settings",
    "load_config",
    "get_settings",
    "set_settings",
    "format_rfc3339",
]

"""
Core components for workflowquery.
"""

from .constants import (
    DELIM_OPEN_PARENTHESES,
    DELIM_CLOSE_PARENTHESES,
    JOINING_OPERATORS,
    LogicalOperator,
    ComparisonOperator,
    SearchAttribute,
    ExecutionStatus,
    token,
)
from .exceptions import (
    WorkflowQueryError,
    ValidationError,
    ConfigurationError,
)
from .builder import ClauseBuilder

__all__ = [
    # Builder
    "ClauseBuilder",
    # Vocabulary
    "DELIM_OPEN_PARENTHESES",
    "DELIM_CLOSE_PARENTHESES",
    "JOINING_OPERATORS",
    "LogicalOperator",
    "ComparisonOperator",
    "SearchAttribute",
    "ExecutionStatus",
    "token",
    # Exceptions
    "WorkflowQueryError",
    "ValidationError",
    "ConfigurationError",
]

"""
Custom exceptions for workflowquery.
"""


class WorkflowQueryError(Exception):
    """Base exception for workflowquery."""
    pass


class ValidationError(WorkflowQueryError):
    """Input validation error (raised only by strict builders)."""
    pass


class ConfigurationError(WorkflowQueryError):
    """Invalid or unreadable configuration."""
    pass

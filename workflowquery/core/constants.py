"""
Query vocabulary for workflow visibility filters.

Delimiters, operator tokens, and the catalogs of built-in search
attributes and execution statuses. The catalogs are a convenience for
callers; the builder accepts any string in their place.
"""

from enum import Enum
from typing import Union


# Query delimiters
DELIM_OPEN_PARENTHESES = "("
DELIM_CLOSE_PARENTHESES = ")"


class LogicalOperator(str, Enum):
    """Logical and keyword tokens used between and inside clauses."""

    NONE = ""
    AND = "AND"
    OR = "OR"
    BETWEEN = "BETWEEN"
    IN = "IN"
    STARTS_WITH = "STARTS_WITH"


# Operators that may join two clauses
JOINING_OPERATORS = frozenset({LogicalOperator.AND, LogicalOperator.OR})


class ComparisonOperator(str, Enum):
    """Comparison symbols placed between an attribute and its value."""

    EQ = "="
    GT = ">"
    LT = "<"
    NE = "!="
    GTE = ">="
    LTE = "<="


class SearchAttribute(str, Enum):
    """Default search attributes of a workflow execution."""

    BATCHER_USER = "BatcherUser"
    BINARY_CHECKSUMS = "BinaryChecksums"
    BUILD_IDS = "BuildIds"
    CLOSE_TIME = "CloseTime"
    EXECUTION_DURATION = "ExecutionDuration"
    EXECUTION_STATUS = "ExecutionStatus"
    EXECUTION_TIME = "ExecutionTime"
    HISTORY_LENGTH = "HistoryLength"
    HISTORY_SIZE_BYTES = "HistorySizeBytes"
    RUN_ID = "RunId"
    START_TIME = "StartTime"
    STATE_TRANSITION_COUNT = "StateTransitionCount"
    TASK_QUEUE = "TaskQueue"
    TEMPORAL_CHANGE_VERSION = "TemporalChangeVersion"
    TEMPORAL_SCHEDULED_START_TIME = "TemporalScheduledStartTime"
    TEMPORAL_SCHEDULED_BY_ID = "TemporalScheduledById"
    TEMPORAL_SCHEDULE_PAUSED = "TemporalSchedulePaused"
    WORKFLOW_ID = "WorkflowId"
    WORKFLOW_TYPE = "WorkflowType"


class ExecutionStatus(str, Enum):
    """Execution status values."""

    RUNNING = "Running"
    COMPLETED = "Completed"
    FAILED = "Failed"
    CANCELED = "Canceled"
    TERMINATED = "Terminated"
    CONTINUED_AS_NEW = "ContinuedAsNew"
    TIMED_OUT = "TimedOut"


Token = Union[str, Enum]


def token(value: Token) -> str:
    """
    Render an operator, attribute, or status as query text.

    Enum members render as their value; anything else goes through str().
    """
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)

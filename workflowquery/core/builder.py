"""
Clause builder for workflow visibility queries.

Builds filter strings such as
``WorkflowType='TestMe' AND ExecutionStatus='Running'`` from a sequence of
calls, so query text is never assembled by ad-hoc string formatting.

Example:
    >>> query = (
    ...     ClauseBuilder()
    ...     .start_clause(SearchAttribute.WORKFLOW_TYPE, "=", "TestMe")
    ...     .and_(SearchAttribute.EXECUTION_STATUS, "=", ExecutionStatus.RUNNING)
    ...     .encode()
    ... )
    >>> query
    "WorkflowType='TestMe' AND ExecutionStatus='Running'"
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, Optional, Tuple, Union, TYPE_CHECKING

from .constants import (
    DELIM_CLOSE_PARENTHESES,
    DELIM_OPEN_PARENTHESES,
    LogicalOperator,
    Token,
    token,
)
from .exceptions import ConfigurationError
from ..utils.logging import get_logger
from ..utils.timefmt import format_rfc3339
from ..utils.validation import (
    validate_attribute,
    validate_comparison_operator,
    validate_logical_operator,
    validate_time_range,
    validate_values,
)

if TYPE_CHECKING:
    from ..config import Settings


logger = get_logger(__name__)

# Attribute clauses are keyed by name, STARTS_WITH clauses by (STARTS_WITH, value)
ClauseKey = Union[str, Tuple[str, str]]

Timestamp = Union[date, str]


def _quote(value: object) -> str:
    return f"'{token(value)}'"


def _timestamp(value: Timestamp) -> str:
    # Strings are taken as already formatted
    if isinstance(value, str):
        return value
    return format_rfc3339(value)


class ClauseBuilder:
    """
    Accumulates named filter clauses and renders them as one query string.

    Each clause is stored under its attribute name, so adding a second
    clause for the same attribute replaces the first in place. Clauses
    render in the order their keys were first added.

    The first clause never carries a logical operator: the operator
    passed for it is ignored. Every later clause is written as
    ``" <logical_operator> <clause>"``.

    With ``strict=False`` (the default) nothing is validated and any input
    passes into the query text unchanged. With ``strict=True`` malformed
    attributes and operators raise ValidationError.

    Not thread-safe; use one builder per query.
    """

    def __init__(
        self,
        strict: Optional[bool] = None,
        settings: Optional["Settings"] = None,
    ):
        if strict is None:
            if settings is None:
                from ..config import Settings, get_settings
                try:
                    settings = get_settings()
                except ConfigurationError as e:
                    logger.warning("Ignoring configuration, using defaults: %s", e)
                    settings = Settings()
            strict = settings.strict_validation
        self.strict = strict
        self._clauses: Dict[ClauseKey, str] = {}

    def _is_leading(self, key: ClauseKey) -> bool:
        """Whether a clause stored under key would be the first one."""
        if not self._clauses:
            return True
        return next(iter(self._clauses)) == key

    def _prefix(self, key: ClauseKey, logical_operator: Token) -> str:
        leading = self._is_leading(key)
        if self.strict:
            joiner = validate_logical_operator(logical_operator, required=not leading)
        else:
            joiner = token(logical_operator)
        if leading:
            return ""
        return f" {joiner} "

    def _attribute(self, attribute: Token) -> str:
        if self.strict:
            return validate_attribute(attribute)
        return token(attribute)

    def _store(self, key: ClauseKey, fragment: str) -> "ClauseBuilder":
        replaced = key in self._clauses
        self._clauses[key] = fragment
        logger.debug(
            "%s clause %r: %r",
            "Replaced" if replaced else "Added",
            key,
            fragment,
        )
        return self

    def start_clause(
        self,
        attribute: Token,
        operator: Token,
        value: object,
    ) -> "ClauseBuilder":
        """
        Add the first clause of a query.

        Renders ``<attribute><operator>'<value>'`` with no logical operator.
        """
        return self.clause(attribute, operator, value, LogicalOperator.NONE)

    def or_(self, attribute: Token, operator: Token, value: object) -> "ClauseBuilder":
        """Add a clause preceded by OR."""
        return self.clause(attribute, operator, value, LogicalOperator.OR)

    def and_(self, attribute: Token, operator: Token, value: object) -> "ClauseBuilder":
        """Add a clause preceded by AND."""
        return self.clause(attribute, operator, value, LogicalOperator.AND)

    def clause(
        self,
        attribute: Token,
        operator: Token,
        value: object,
        logical_operator: Token = LogicalOperator.NONE,
    ) -> "ClauseBuilder":
        """
        Add a comparison clause.

        Args:
            attribute: Search attribute name
            operator: Comparison symbol, e.g. ``=`` or ``>``
            value: Compared value, rendered single-quoted
            logical_operator: Operator joining this clause to the previous ones

        Returns:
            The builder, for chaining
        """
        name = self._attribute(attribute)
        symbol = (
            validate_comparison_operator(operator) if self.strict else token(operator)
        )
        prefix = self._prefix(name, logical_operator)
        return self._store(name, f"{prefix}{name}{symbol}{_quote(value)}")

    def between(
        self,
        attribute: Token,
        start: Timestamp,
        end: Timestamp,
        logical_operator: Token = LogicalOperator.NONE,
    ) -> "ClauseBuilder":
        """
        Add a parenthesized range clause.

        Renders ``(<attribute> BETWEEN '<start>' AND '<end>')`` with both
        bounds in RFC 3339, e.g.
        ``(StartTime BETWEEN '2024-12-16T20:47:35Z' AND '2024-12-16T20:52:35Z')``.
        Naive datetimes are read as local time and rendered with the
        host's UTC offset; strings are used as given.
        """
        name = self._attribute(attribute)
        if self.strict and isinstance(start, date) and isinstance(end, date):
            validate_time_range(start, end)
        prefix = self._prefix(name, logical_operator)
        fragment = (
            f"{prefix}{DELIM_OPEN_PARENTHESES}{name} {LogicalOperator.BETWEEN.value} "
            f"{_quote(_timestamp(start))} {LogicalOperator.AND.value} "
            f"{_quote(_timestamp(end))}{DELIM_CLOSE_PARENTHESES}"
        )
        return self._store(name, fragment)

    def in_(
        self,
        attribute: Token,
        values: Iterable[object],
        logical_operator: Token = LogicalOperator.NONE,
    ) -> "ClauseBuilder":
        """
        Add a membership clause: ``<attribute> IN ('a', 'b')``.

        Values keep their input order. No values renders ``<attribute> IN ()``.
        A bare string is one value, not a sequence of characters; strict
        builders reject it.
        """
        name = self._attribute(attribute)
        if self.strict:
            validate_values(values)
        elif isinstance(values, str):
            values = [values]
        quoted = ", ".join(_quote(v) for v in values)
        prefix = self._prefix(name, logical_operator)
        fragment = (
            f"{prefix}{name} {LogicalOperator.IN.value} "
            f"{DELIM_OPEN_PARENTHESES}{quoted}{DELIM_CLOSE_PARENTHESES}"
        )
        return self._store(name, fragment)

    def starts_with(
        self,
        value: object,
        logical_operator: Token = LogicalOperator.NONE,
    ) -> "ClauseBuilder":
        """
        Add a prefix clause: ``STARTS_WITH '<value>'``.

        Stored under ``(STARTS_WITH, value)``, so it never replaces an
        attribute clause; a second call with the same value replaces the first.
        """
        text = token(value)
        key = (LogicalOperator.STARTS_WITH.value, text)
        prefix = self._prefix(key, logical_operator)
        return self._store(
            key, f"{prefix}{LogicalOperator.STARTS_WITH.value} {_quote(text)}"
        )

    def encode(self) -> str:
        """Render the query by joining all clauses in stored order."""
        query = "".join(self._clauses.values())
        logger.debug("Encoded query: %r", query)
        return query

    def keys(self) -> Tuple[ClauseKey, ...]:
        """Keys of the stored clauses, in render order."""
        return tuple(self._clauses)

    def clear(self) -> None:
        """Remove all clauses."""
        self._clauses.clear()

    def copy(self) -> "ClauseBuilder":
        """Return an independent builder holding the same clauses."""
        other = ClauseBuilder(strict=self.strict)
        other._clauses = dict(self._clauses)
        return other

    def __contains__(self, key: object) -> bool:
        return key in self._clauses

    def __len__(self) -> int:
        return len(self._clauses)

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"ClauseBuilder(strict={self.strict}, query={self.encode()!r})"

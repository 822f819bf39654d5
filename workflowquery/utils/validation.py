"""
Input validation for strict clause builders.
"""

from datetime import date
import re

from ..core.constants import (
    ComparisonOperator,
    JOINING_OPERATORS,
    LogicalOperator,
    Token,
    token,
)
from ..core.exceptions import ValidationError


# Attribute names are single identifiers: no whitespace, quotes or parentheses
ATTRIBUTE_PATTERN = re.compile(r"^[^\s'\"()]+$")

MAX_ATTRIBUTE_LENGTH = 256

_COMPARISON_TOKENS = frozenset(op.value for op in ComparisonOperator)
_JOINING_TOKENS = frozenset(op.value for op in JOINING_OPERATORS)


def validate_attribute(attribute: Token) -> str:
    """
    Validate a search attribute name.

    Args:
        attribute: The attribute name (or SearchAttribute member)

    Returns:
        The attribute rendered as text

    Raises:
        ValidationError: If the name is empty or not a single identifier
    """
    name = token(attribute)

    if not name:
        raise ValidationError("Attribute name cannot be empty")

    if len(name) > MAX_ATTRIBUTE_LENGTH:
        raise ValidationError(
            f"Attribute name too long: {len(name)} characters "
            f"(max {MAX_ATTRIBUTE_LENGTH})"
        )

    if not ATTRIBUTE_PATTERN.match(name):
        raise ValidationError(
            f"Invalid attribute name '{name}': must not contain whitespace, "
            "quotes or parentheses"
        )

    return name


def validate_comparison_operator(operator: Token) -> str:
    """Check that operator is one of ComparisonOperator."""
    symbol = token(operator)
    if symbol not in _COMPARISON_TOKENS:
        raise ValidationError(
            f"Unknown comparison operator '{symbol}', expected one of "
            f"{sorted(_COMPARISON_TOKENS)}"
        )
    return symbol


def validate_logical_operator(operator: Token, required: bool) -> str:
    """
    Validate the operator joining a clause to the ones before it.

    Args:
        operator: The logical operator
        required: Whether the clause follows another one

    Returns:
        The operator rendered as text

    Raises:
        ValidationError: If a joiner is required and operator is not AND/OR
    """
    joiner = token(operator)
    if not required:
        return joiner

    if joiner == LogicalOperator.NONE.value:
        raise ValidationError(
            "A logical operator (AND/OR) is required after the first clause"
        )

    if joiner not in _JOINING_TOKENS:
        raise ValidationError(
            f"Invalid logical operator '{joiner}', expected AND or OR"
        )

    return joiner


def validate_time_range(start: date, end: date) -> None:
    """Reject a range whose start is after its end."""
    if not isinstance(start, date) or not isinstance(end, date):
        raise ValidationError(
            "Range bounds must be datetimes, got "
            f"{type(start).__name__} and {type(end).__name__}"
        )
    try:
        inverted = start > end
    except TypeError as e:
        raise ValidationError(f"Cannot compare range bounds: {e}") from e
    if inverted:
        raise ValidationError(
            f"Range start {start.isoformat()} is after end {end.isoformat()}"
        )


def validate_values(values: object) -> None:
    """Require IN values to be a sequence of values, not a single string."""
    if isinstance(values, (str, bytes)):
        raise ValidationError(
            f"IN values must be a list of values, got {type(values).__name__} "
            f"{values!r}"
        )

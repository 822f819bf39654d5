"""
RFC 3339 timestamp rendering for range clauses.
"""

from datetime import date, datetime, time, timezone


def format_rfc3339(value: date) -> str:
    """
    Format a timestamp as RFC 3339 with second precision.

    A zero UTC offset is written as ``Z``, any other offset as ``+HH:MM``
    or ``-HH:MM``. Fractional seconds are truncated. Naive datetimes are
    local wall-clock time and get the host's offset, so ``datetime.now()``
    names the right moment. A plain ``date`` is rendered at midnight UTC.

    Args:
        value: The datetime (or date) to format

    Returns:
        e.g. ``2024-12-16T20:47:35Z``
    """
    if not isinstance(value, datetime):
        if not isinstance(value, date):
            raise TypeError(
                f"Expected datetime or date, got {type(value).__name__}"
            )
        value = datetime.combine(value, time(0, 0), tzinfo=timezone.utc)

    if value.tzinfo is None or value.utcoffset() is None:
        value = value.astimezone()

    rendered = value.replace(microsecond=0).isoformat()
    if rendered.endswith("+00:00"):
        rendered = rendered[:-6] + "Z"
    return rendered

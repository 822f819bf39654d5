"""
Pytest fixtures for workflowquery tests.
"""

import pytest
from datetime import datetime, timedelta, timezone

from workflowquery.config import set_settings
from workflowquery.core.builder import ClauseBuilder


@pytest.fixture(autouse=True)
def reset_settings():
    """Drop cached global settings between tests."""
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def builder() -> ClauseBuilder:
    """Empty non-strict builder."""
    return ClauseBuilder(strict=False)


@pytest.fixture
def strict_builder() -> ClauseBuilder:
    """Empty strict builder."""
    return ClauseBuilder(strict=True)


@pytest.fixture
def window_start() -> datetime:
    """Start of a five minute window."""
    return datetime(2024, 12, 16, 20, 47, 35, tzinfo=timezone.utc)


@pytest.fixture
def window_end(window_start: datetime) -> datetime:
    """End of a five minute window."""
    return window_start + timedelta(minutes=5)

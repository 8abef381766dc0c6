"""Shared pytest fixtures."""

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so no test logs to another test's stream."""
    yield
    structlog.reset_defaults()

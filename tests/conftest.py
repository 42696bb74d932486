"""
Shared pytest fixtures and configuration for all tests.
"""

from datetime import datetime

import pytest
import pytz

from datetime_mcp.core.settings import Config


@pytest.fixture
def test_config():
    """Fixture to provide a config that ignores the environment, rendering in UTC."""
    return Config.create_test_config(timezone="UTC")


@pytest.fixture
def sample_instant():
    """2024-01-15T10:30:00.000Z"""
    return datetime(2024, 1, 15, 10, 30, 0, tzinfo=pytz.UTC)

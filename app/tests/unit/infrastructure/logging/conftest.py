"""Fixtures for infrastructure.logging tests."""

import pytest

from infrastructure.configuration import Settings


@pytest.fixture
def dev_settings():
    """Non-production settings: console renderer, verbose level."""
    return Settings(PREFIX="dev-", LOG_LEVEL="DEBUG")


@pytest.fixture
def production_settings():
    """Production settings: empty PREFIX selects the JSON renderer."""
    return Settings(PREFIX="", LOG_LEVEL="WARNING")

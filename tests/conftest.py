"""Pytest fixtures shared by the assertkit tests."""

import pytest

from assertkit import LocationTag, reset_config


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the built-in configuration."""
    config = reset_config()
    yield config
    reset_config()


@pytest.fixture()
def loc():
    return LocationTag("test_file.py", 42)

"""Pytest configuration and shared fixtures for twimg tests

This module provides common fixtures and test utilities used across
unit tests.
"""

import logging
from pathlib import Path
from typing import Generator

import pytest

from twimg.common.config import Config, ConfigLoader, ScalingOptions
from twimg.common.settings import settings
from twimg.scaling.provider import QueryStringScalingProvider


@pytest.fixture
def options() -> ScalingOptions:
    """sm/md/lg breakpoints with 1x and 2x ratios"""
    return ScalingOptions.from_pairs(
        [("sm", 640), ("md", 768), ("lg", 1024)],
        device_pixel_ratios=[1, 2],
    )


@pytest.fixture
def provider() -> QueryStringScalingProvider:
    """Default query-string scaling provider"""
    return QueryStringScalingProvider()


@pytest.fixture
def sample_config() -> Config:
    """Load the sample configuration shipped at the repository root

    Returns:
        Config object with sample values
    """
    config_path = Path(__file__).parent.parent / "twimg.yml"
    if not config_path.exists():
        pytest.skip("twimg.yml not found - required for this test")
    return ConfigLoader.config_load(config_path)


@pytest.fixture
def reset_settings() -> Generator[None, None, None]:
    """Reset settings singleton between tests

    This fixture ensures each test gets a fresh Settings instance.
    """
    settings._initialized = False
    settings._config = None
    yield
    settings._initialized = False
    settings._config = None


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)

"""
Pytest configuration for flakeid tests.

This module provides:
- A fresh default generator for every test
- A clean ``flakeid`` logger after CLI runs reconfigure it
"""

import logging

import pytest

from flakeid.clock import ManualClock
from flakeid.snowflake import reset_default_generator

# Fixed reading used by ManualClock-driven tests (2024-06-01 00:00:00 UTC)
CLOCK_START = 1717200000000


@pytest.fixture(autouse=True)
def fresh_default_generator():
    reset_default_generator()
    yield
    reset_default_generator()


@pytest.fixture(autouse=True)
def restore_package_logger():
    package_logger = logging.getLogger("flakeid")
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def clock():
    """Manual clock starting at CLOCK_START."""
    return ManualClock(CLOCK_START)

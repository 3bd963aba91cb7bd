"""
conftest.py
-----------
Shared pytest configuration and fixtures for invaders_core tests.

Contains:
- A controllable millisecond clock for cooldown-driven behaviour
- Pytest configuration and hooks
"""

import os

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start=1000):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def fake_clock():
    """Clock starting at t=1000ms that only moves when told to."""
    return FakeClock()


@pytest.fixture
def quiet_logger(monkeypatch):
    """Disable console logging for the duration of a test."""
    from invaders_core.core.debug.debug_logger import LoggerConfig
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "test_" in item.nodeid:
            item.add_marker(pytest.mark.unit)
            item.add_marker(pytest.mark.regression)

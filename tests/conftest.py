"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import time

import pytest

from caldate.core import config as config_module


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv('CALDATE_ENV', 'test')
    monkeypatch.delenv('CALDATE_STRICT', raising=False)
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    monkeypatch.delenv('DEBUG', raising=False)

    # Drop any configuration cached by an earlier test
    monkeypatch.setattr(config_module, '_config', None)


@pytest.fixture
def local_zone(monkeypatch):
    """Switch the process time zone for one test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def use(name):
        monkeypatch.setenv("TZ", name)
        time.tzset()

    yield use
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def iso_test_cases():
    """ISO inputs with their canonical forms."""
    return [
        {'input': '2024-01-15', 'canonical': '2024-01-15'},
        {'input': '2024-1-5', 'canonical': '2024-01-05'},
        {'input': '1999-12-1', 'canonical': '1999-12-01'},
        {'input': '2000-2-29', 'canonical': '2000-02-29'},
        {'input': '1000-01-01', 'canonical': '1000-01-01'},
        {'input': '2999-12-31', 'canonical': '2999-12-31'},
    ]


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "dates: Tests for CalendarDate parsing, comparison and arithmetic"
    )
    config.addinivalue_line(
        "markers", "cli: Tests for the command-line interface"
    )

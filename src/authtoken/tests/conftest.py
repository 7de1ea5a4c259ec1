# ABOUTME: pytest configuration for authtoken tests
# ABOUTME: Configures timeouts, settings isolation and shared token fixtures

import pytest
from loguru import logger

from authtoken.config.settings import get_settings
from authtoken.implementations.memory.scheduler import VirtualTimerScheduler

# 2025-01-17T10:00:00Z
START_MS = 1_737_108_000_000


def pytest_configure(config):
    """Configure pytest for authtoken tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings so environment changes in a test are picked up."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def scheduler():
    """Virtual scheduler starting at a fixed instant."""
    return VirtualTimerScheduler(start_ms=START_MS)


@pytest.fixture
def token_options():
    """Options for an access token expiring 1000ms after START_MS with a 500ms warning."""
    return {
        "value": "tok-abcdefghijklmnop",
        "expires": START_MS + 1000,
        "warnFor": 500,
        "type": "access",
    }


@pytest.fixture
def log_records():
    """Capture loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE", format="{message}")
    yield records
    logger.remove(handler_id)

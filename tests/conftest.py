"""
Test configuration and fixtures for pytest.

Every test gets its own log file under tmp_path; the echo server is driven
through Flask's test client and the generator with a no-op sleep.
"""

import pytest

from relay.config import Config
from relay.echo import create_app
from relay.generator import Generator
from relay.sharedlog import SharedLog


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "integration: mark test as an integration test")


@pytest.fixture
def log_path(tmp_path):
    """Path of a shared log that does not exist yet."""
    return tmp_path / "data" / "output.txt"


@pytest.fixture
def relay_config(log_path):
    return Config(log_path=str(log_path), interval=2.0, port=8000)


@pytest.fixture
def shared_log(log_path):
    return SharedLog(log_path)


@pytest.fixture
def sleeps():
    """Records every sleep the generator asks for instead of sleeping."""
    return []


@pytest.fixture
def generator(relay_config, sleeps):
    return Generator.from_config(relay_config, sleep=sleeps.append)


@pytest.fixture
def app(relay_config):
    app = create_app(relay_config)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()

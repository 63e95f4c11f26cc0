"""
Pytest fixtures for configuration contract tests.

The contract describes what any subsystem may rely on when it reads the
tuning table: every parameter is present, typed, and never changes.
"""

import pytest

from zeph.config.game_config import CONFIG


@pytest.fixture
def config_server():
    """Provide the shared configuration table."""
    yield CONFIG


def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line(
        "markers", "concurrency: marks tests that read from several threads"
    )

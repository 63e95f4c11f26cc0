"""Pytest configuration and shared fixtures."""
import os
import sys

import pytest
from unittest.mock import Mock

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))


@pytest.fixture
def character():
    """Create a character stand-in with fresh regen and attack state."""
    instance = Mock()
    instance.regen_tick = 0.0
    instance.poisoned = False
    instance.atk_tick = 0
    instance.aspd = 0
    return instance

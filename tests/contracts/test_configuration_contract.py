"""
Configuration Contract Tests - read-only parameter access

Tests verify that configuration parameters can be read from anywhere,
never fail for known names, and cannot be changed.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Protocol

import pytest


class ConfigServer(Protocol):
    """Interface for read-only configuration access"""

    def get_config_param(self, param_name: str) -> Any:
        """Get a configuration parameter value"""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Get all configuration parameters"""
        ...


class TestConfigReadContract:
    """Contract: Configuration parameter reads"""

    def test_config_parameter_read(self, config_server: ConfigServer):
        """MUST: Configuration parameters can be read"""
        params = config_server.to_dict()

        assert isinstance(params, dict), "Config should return a dictionary"
        assert len(params) > 0, "Config should have some parameters"

    def test_config_lookup_never_fails(self, config_server: ConfigServer):
        """MUST: Every listed parameter can be looked up by name"""
        for name, value in config_server.to_dict().items():
            assert config_server.get_config_param(name) == value

    def test_config_values_are_numeric(self, config_server: ConfigServer):
        """MUST: All parameters are numeric"""
        for name, value in config_server.to_dict().items():
            assert isinstance(value, (int, float)), \
                f"Parameter '{name}' should be numeric, got {type(value)}"
            assert not isinstance(value, bool)

    def test_config_values_are_positive(self, config_server: ConfigServer):
        """SHOULD: Sizes, caps and intervals are positive"""
        for name, value in config_server.to_dict().items():
            assert value > 0, f"Parameter '{name}' should be positive"

    def test_config_parameter_names_consistent(self, config_server: ConfigServer):
        """SHOULD: Parameter names are lowercase with underscores"""
        for param_name in config_server.to_dict():
            assert isinstance(param_name, str), "Parameter names should be strings"
            assert param_name == param_name.lower(), \
                f"Parameter name '{param_name}' should be lowercase with underscores"


class TestConfigImmutabilityContract:
    """Contract: Configuration cannot change at runtime"""

    def test_config_rejects_writes(self, config_server: ConfigServer):
        """MUST: Every parameter rejects assignment"""
        for name, value in config_server.to_dict().items():
            with pytest.raises(AttributeError):
                setattr(config_server, name, value)

    def test_config_unchanged_after_failed_writes(self, config_server: ConfigServer):
        """MUST: Failed writes leave values intact"""
        before = config_server.to_dict()

        for name in before:
            try:
                setattr(config_server, name, -1)
            except AttributeError:
                pass

        assert config_server.to_dict() == before


@pytest.mark.concurrency
class TestConfigStateContract:
    """Contract: Configuration state under concurrent readers"""

    def test_config_concurrent_reads_consistent(self, config_server: ConfigServer):
        """MUST: Concurrent configuration reads are consistent"""
        expected = config_server.to_dict()

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: config_server.to_dict(), range(64)))

        assert all(r == expected for r in results), "Config reads not consistent"

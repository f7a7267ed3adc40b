"""Property tests for configuration loading.

Property 8: Environment Configuration Loading
For any valid environment variable values, the system SHALL read and use
them; invalid values SHALL raise ConfigurationError naming the variable.
"""
import logging
import os
import pytest
from hypothesis import given, strategies as st, settings, HealthCheck
from unittest.mock import patch

from registry_dns.config import Config, ConfigurationError


# Strategy for valid prefixes (no slashes inside)
prefix_strategy = st.text(
    alphabet='abcdefghijklmnopqrstuvwxyz0123456789-_',
    min_size=1,
    max_size=20
)


class TestEnvironmentConfigurationLoading:
    """Property 8: Environment Configuration Loading"""

    def test_defaults(self, clean_env):
        """Without variables, Config.from_env() SHALL use the defaults.

        Feature: registry-dns, Property 8: Environment Configuration Loading
        """
        config = Config.from_env()

        assert config.prefix == "skydns"
        assert config.log_level == "INFO"
        assert config.log_level_value == logging.INFO
        assert config.ptr_ttl == 0

    @given(
        prefix=prefix_strategy,
        log_level=st.sampled_from(["debug", "INFO", "Warning", "ERROR", "critical"]),
        ptr_ttl=st.integers(min_value=0, max_value=2 ** 32 - 1),
    )
    @settings(max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_config_reads_env_vars(self, prefix, log_level, ptr_ttl):
        """For any valid values, Config.from_env() SHALL read and use them.

        Feature: registry-dns, Property 8: Environment Configuration Loading
        """
        env_vars = {
            "REGISTRY_DNS_PREFIX": f"/{prefix}/",
            "REGISTRY_DNS_LOG_LEVEL": log_level,
            "REGISTRY_DNS_PTR_TTL": str(ptr_ttl),
        }

        with patch.dict(os.environ, env_vars, clear=False):
            config = Config.from_env()

            assert config.prefix == prefix
            assert config.log_level == log_level.upper()
            assert config.ptr_ttl == ptr_ttl

    @pytest.mark.parametrize("name,value", [
        ("REGISTRY_DNS_PREFIX", ""),
        ("REGISTRY_DNS_PREFIX", "///"),
        ("REGISTRY_DNS_PREFIX", "a/b"),
        ("REGISTRY_DNS_LOG_LEVEL", "verbose"),
        ("REGISTRY_DNS_PTR_TTL", "soon"),
        ("REGISTRY_DNS_PTR_TTL", "-1"),
        ("REGISTRY_DNS_PTR_TTL", str(2 ** 32)),
    ])
    def test_invalid_value_raises(self, clean_env, name, value):
        """An invalid value SHALL raise ConfigurationError naming the variable.

        Feature: registry-dns, Property 8: Environment Configuration Loading
        """
        with patch.dict(os.environ, {name: value}):
            with pytest.raises(ConfigurationError) as exc_info:
                Config.from_env()

            assert name in str(exc_info.value)

    def test_all_invalid_variables_reported(self, clean_env):
        """Every invalid variable SHALL be listed in the error.

        Feature: registry-dns, Property 8: Environment Configuration Loading
        """
        env_vars = {
            "REGISTRY_DNS_PREFIX": "a/b",
            "REGISTRY_DNS_LOG_LEVEL": "loud",
            "REGISTRY_DNS_PTR_TTL": "x",
        }

        with patch.dict(os.environ, env_vars):
            with pytest.raises(ConfigurationError) as exc_info:
                Config.from_env()

            error_msg = str(exc_info.value)
            assert "REGISTRY_DNS_PREFIX" in error_msg
            assert "REGISTRY_DNS_LOG_LEVEL" in error_msg
            assert "REGISTRY_DNS_PTR_TTL" in error_msg

"""
Tests for ConnectorConfig.
"""

import pytest
from pydantic import ValidationError

from api_connector import ConfigurationError, ConnectorConfig, __version__


class TestConnectorConfig:
    """Test configuration."""

    def test_defaults(self):
        config = ConnectorConfig()

        assert config.timeout == (5.0, 30.0)
        assert config.verify_ssl is True
        assert config.debug is False
        assert config.user_agent == f"api-connector-python/{__version__}"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError, match="Timeout must be positive"):
            ConnectorConfig(timeout_read=0)

    def test_config_from_env(self, monkeypatch):
        """Test configuration from environment variables."""
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_CONNECT", "1.5")
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_READ", "12")
        monkeypatch.setenv("API_CONNECTOR_VERIFY_SSL", "false")
        monkeypatch.setenv("API_CONNECTOR_DEBUG", "yes")
        monkeypatch.setenv("API_CONNECTOR_USER_AGENT", "menu-sync/2.0")

        config = ConnectorConfig.from_env()

        assert config.timeout == (1.5, 12.0)
        assert config.verify_ssl is False
        assert config.debug is True
        assert config.user_agent == "menu-sync/2.0"

    def test_from_env_uses_defaults_when_unset(self, monkeypatch):
        for name in ("TIMEOUT_CONNECT", "TIMEOUT_READ", "VERIFY_SSL", "DEBUG", "USER_AGENT"):
            monkeypatch.delenv(f"API_CONNECTOR_{name}", raising=False)

        assert ConnectorConfig.from_env() == ConnectorConfig()

    def test_from_env_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("GREATFOOD_TIMEOUT_READ", "3")

        assert ConnectorConfig.from_env(prefix="GREATFOOD_").timeout_read == 3.0

    def test_from_env_invalid_value(self, monkeypatch):
        monkeypatch.setenv("API_CONNECTOR_TIMEOUT_CONNECT", "soon")

        with pytest.raises(ConfigurationError, match="Invalid connector configuration"):
            ConnectorConfig.from_env()

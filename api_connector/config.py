"""
Configuration module for the API connector.
"""

import os
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .__version__ import __version__
from .exceptions import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}


class ConnectorConfig(BaseModel):
    """
    Transport configuration used to build the default ``RequestsAdapter``.

    Supports environment variables for easy configuration (see ``from_env``):
    - API_CONNECTOR_TIMEOUT_CONNECT: Connect timeout in seconds (default: 5.0)
    - API_CONNECTOR_TIMEOUT_READ: Read timeout in seconds (default: 30.0)
    - API_CONNECTOR_VERIFY_SSL: Verify TLS certificates (default: true)
    - API_CONNECTOR_DEBUG: Enable debug logging (default: false)
    - API_CONNECTOR_USER_AGENT: User-Agent header value
    """

    timeout_connect: float = Field(5.0, description="Connection timeout in seconds")
    timeout_read: float = Field(30.0, description="Read timeout in seconds")
    verify_ssl: bool = Field(True, description="Verify SSL certificates")
    debug: bool = Field(False, description="Enable debug logging")
    user_agent: str = Field(
        f"api-connector-python/{__version__}", description="User-Agent header value"
    )

    @field_validator("timeout_connect", "timeout_read")
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    @property
    def timeout(self) -> tuple:
        """(connect, read) tuple in the form requests expects"""
        return (self.timeout_connect, self.timeout_read)

    @classmethod
    def from_env(cls, prefix: str = "API_CONNECTOR_") -> "ConnectorConfig":
        """
        Build configuration from environment variables.

        Args:
            prefix: Environment variable prefix

        Returns:
            ConnectorConfig with unset variables left at their defaults

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        values = {}

        def env(name: str) -> Optional[str]:
            return os.getenv(f"{prefix}{name}")

        if env("TIMEOUT_CONNECT") is not None:
            values["timeout_connect"] = env("TIMEOUT_CONNECT")
        if env("TIMEOUT_READ") is not None:
            values["timeout_read"] = env("TIMEOUT_READ")
        if env("VERIFY_SSL") is not None:
            values["verify_ssl"] = env("VERIFY_SSL").strip().lower() in _TRUTHY
        if env("DEBUG") is not None:
            values["debug"] = env("DEBUG").strip().lower() in _TRUTHY
        if env("USER_AGENT"):
            values["user_agent"] = env("USER_AGENT")

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid connector configuration: {e}") from e

"""
Logging helpers for the API connector

Provides a JSON formatter for structured logging output and helpers that keep
credentials out of log lines.
"""

import json
import logging
import sys
from typing import Any, Dict, Mapping

REDACTED = "***REDACTED***"

SENSITIVE_HEADER_PARTS = ("authorization", "token", "secret", "api-key", "api_key", "cookie")


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string with timestamp, logger name, level, message
        """
        payload: Dict[str, Any] = {
            "ts": int(record.created * 1000),  # milliseconds
            "name": record.name,
            "level": record.levelname,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for field in ("method", "url", "status_code"):
            if hasattr(record, field):
                payload[field] = getattr(record, field)

        return json.dumps(payload, default=str)


def setup_structured_logger(level: int = logging.INFO) -> None:
    """
    Configure structured JSON logging for the connector.

    Args:
        level: Logging level (default: logging.INFO)

    Example:
        >>> from api_connector.logging_setup import setup_structured_logger
        >>> setup_structured_logger(logging.DEBUG)
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    connector_logger = logging.getLogger("api_connector")
    connector_logger.setLevel(level)
    connector_logger.handlers = [handler]
    connector_logger.propagate = False


def setup_logging(debug: bool = False) -> None:
    """
    Setup plain-text logging for the connector

    Args:
        debug: Enable debug level logging
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("api_connector").setLevel(level)


def sanitize_headers(headers: Mapping[str, str]) -> Dict[str, str]:
    """
    Redact credential-bearing headers before logging.

    Example:
        >>> sanitize_headers({"Authorization": "Bearer abc", "Accept": "application/json"})
        {'Authorization': '***REDACTED***', 'Accept': 'application/json'}
    """
    sanitized = {}
    for key, value in headers.items():
        if any(part in key.lower() for part in SENSITIVE_HEADER_PARTS):
            sanitized[key] = REDACTED
        else:
            sanitized[key] = value
    return sanitized

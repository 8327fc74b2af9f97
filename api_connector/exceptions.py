"""
Exception classes for the API connector.

Every failure of ``Connector.send`` is reported as exactly one of
``EncodingError``, ``TransportError``, ``HttpError`` or ``DecodingError``.
"""

from typing import Dict, Optional

import requests


class ConnectorError(Exception):
    """Base exception for all connector errors."""

    pass


class ConfigurationError(ConnectorError):
    """Connector configuration error"""

    pass


class EncodingError(ConnectorError):
    """
    Request body encoding error.

    Raised when the request body cannot be serialized to JSON. No network
    call has been made when this is raised.
    """

    pass


class TransportError(ConnectorError):
    """
    Transport error.

    Raised when no response was obtained (DNS, connect, invalid URL, ...).
    """

    pass


class TransportTimeoutError(TransportError):
    """Request timed out before a response was obtained."""

    pass


class HttpError(ConnectorError):
    """
    HTTP error exception.

    Raised when a response was obtained with a status outside 2xx.
    """

    def __init__(
        self,
        status_code: int,
        body: str = "",
        headers: Optional[Dict[str, str]] = None,
        fallback_message: Optional[str] = None,
    ):
        """
        Initialize HTTP error.

        Args:
            status_code: HTTP status code
            body: Raw response body text
            headers: Response headers
            fallback_message: Transport message used when the body is empty
        """
        self.status_code = status_code
        self.body = body or ""
        self.headers = headers or {}
        detail = self.body or fallback_message or "no response body"
        super().__init__(
            f"HTTP request failed with status {status_code}: {detail}"
        )

    @classmethod
    def from_requests_exception(cls, exc: requests.exceptions.HTTPError) -> "HttpError":
        """Create HttpError from a requests ``raise_for_status`` exception"""
        response = exc.response
        if response is None:
            return cls(status_code=0, fallback_message=str(exc))

        return cls(
            status_code=response.status_code,
            body=response.text,
            headers=dict(response.headers),
            fallback_message=str(exc),
        )

    def __repr__(self) -> str:
        return f"HttpError(status_code={self.status_code}, body={self.body[:200]!r})"


class DecodingError(ConnectorError):
    """
    Response decoding error.

    Raised when a response body is present but is not valid JSON.
    """

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body

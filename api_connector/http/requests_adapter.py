"""
Requests-based HTTP adapter (synchronous).
"""

import logging
import time
from typing import Any, Dict, Optional, Tuple, Union

import requests

from .adapter import HTTPAdapter
from ..config import ConnectorConfig
from ..exceptions import HttpError, TransportError, TransportTimeoutError
from ..logging_setup import sanitize_headers
from ..metrics import record_exchange

logger = logging.getLogger("api_connector.http")

Timeout = Union[float, Tuple[float, float]]


class RequestsAdapter(HTTPAdapter):
    """
    Synchronous HTTP adapter using requests library.

    Features:
    - Connection pooling via session
    - Configurable (connect, read) timeouts
    - Raises HttpError on 4xx/5xx by default
    - Prometheus metrics per exchange

    Examples:
        >>> adapter = RequestsAdapter(timeout=(2.0, 10.0))
        >>> status, text, headers = adapter.send("GET", "https://api.example.test/ping", {})
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Timeout = (5.0, 30.0),
        verify: bool = True,
        raise_for_status: bool = True,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize requests adapter.

        Args:
            session: Optional requests.Session instance
            timeout: Request timeout, seconds or (connect, read) tuple
            verify: Verify TLS certificates
            raise_for_status: Raise HttpError for 4xx/5xx responses
            user_agent: Session-level User-Agent header
        """
        self._external_session = session is not None
        self.session = session or requests.Session()
        self.timeout = timeout
        self.verify = verify
        self.raise_for_status = raise_for_status

        if user_agent:
            self.session.headers["User-Agent"] = user_agent

    @classmethod
    def from_config(cls, config: ConnectorConfig) -> "RequestsAdapter":
        """Build an adapter from connector configuration"""
        return cls(
            timeout=config.timeout,
            verify=config.verify_ssl,
            user_agent=config.user_agent,
        )

    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[str] = None,
    ) -> Tuple[int, str, Dict[str, str]]:
        """
        Send HTTP request using requests library.

        Args:
            method: HTTP method
            url: Request URL
            headers: Request headers
            data: Encoded request payload

        Returns:
            Tuple of (status_code, response_text, response_headers)

        Raises:
            HttpError: On 4xx/5xx when raise_for_status is enabled
            TransportTimeoutError: On request timeout
            TransportError: On any other failure to obtain a response
        """
        logger.debug(
            "Request %s %s headers=%s", method, url, sanitize_headers(headers)
        )
        start = time.time()

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                data=data.encode("utf-8") if data is not None else None,
                timeout=self.timeout,
                verify=self.verify,
            )
        except requests.exceptions.Timeout as e:
            record_exchange(method, "error", time.time() - start)
            raise TransportTimeoutError(f"Request timed out: {e}") from e
        except requests.exceptions.RequestException as e:
            record_exchange(method, "error", time.time() - start)
            raise TransportError(f"Request failed: {e}") from e

        record_exchange(method, response.status_code, time.time() - start)
        logger.debug(
            "Response %d %s",
            response.status_code,
            response.text[:1000] if response.text else "",
        )

        if self.raise_for_status:
            try:
                response.raise_for_status()
            except requests.exceptions.HTTPError as e:
                raise HttpError.from_requests_exception(e) from e

        return (
            response.status_code,
            response.text,
            dict(response.headers),
        )

    def close(self) -> None:
        """Close the session if this adapter created it."""
        if not self._external_session:
            self.session.close()

    def __enter__(self) -> "RequestsAdapter":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

"""
Connector: dispatches requests against one REST API.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional

from requests.structures import CaseInsensitiveDict

from .config import ConnectorConfig
from .exceptions import DecodingError, EncodingError, HttpError
from .http.adapter import HTTPAdapter
from .http.method import HttpMethod
from .http.requests_adapter import RequestsAdapter
from .logging_setup import setup_logging
from .request import Request

JSON_CONTENT_TYPE = "application/json"


def _reject_constant(token: str) -> None:
    raise ValueError(f"Invalid JSON token: {token}")


class Connector(ABC):
    """
    Abstract base connector for API communication.

    Concrete connectors supply the base URL and the default headers of their
    API; everything else (header merging, body encoding, response decoding,
    error translation) happens in ``send``.

    Examples:
        >>> class ExampleConnector(Connector):
        ...     def resolve_base_url(self) -> str:
        ...         return "https://api.example.test"
        ...
        ...     def default_headers(self) -> Dict[str, str]:
        ...         return {"Accept": "application/json"}
        >>> @dataclass(frozen=True)
        ... class GetUserRequest(BaseRequest):
        ...     user_id: int
        ...
        ...     def endpoint(self) -> str:
        ...         return f"/users/{self.user_id}"
        ...
        ...     def method(self) -> HttpMethod:
        ...         return HttpMethod.GET
        >>> connector = ExampleConnector()
        >>> connector.send(GetUserRequest(user_id=42))
        {'id': 42, 'name': 'Ada'}
    """

    def __init__(
        self,
        http_adapter: Optional[HTTPAdapter] = None,
        config: Optional[ConnectorConfig] = None,
    ):
        """
        Initialize connector.

        Args:
            http_adapter: Optional custom HTTP adapter
            config: Transport configuration used when no adapter is given
        """
        self.config = config or ConnectorConfig()

        if self.config.debug:
            setup_logging(debug=True)

        self.http = http_adapter or RequestsAdapter.from_config(self.config)

    @abstractmethod
    def resolve_base_url(self) -> str:
        """Base URL of the API, without trailing slash."""
        raise NotImplementedError

    @abstractmethod
    def default_headers(self) -> Mapping[str, str]:
        """
        Headers included in every request.

        Evaluated on each ``send``, so it may reflect authentication state
        that changes over the connector's lifetime.
        """
        raise NotImplementedError

    def send(self, request: Request) -> Dict[str, Any]:
        """
        Send a request to the API.

        Args:
            request: The request to send

        Returns:
            The decoded response, always a dict. Non-object JSON payloads
            are wrapped as ``{"data": value}`` and an empty body yields ``{}``.

        Raises:
            EncodingError: If the request body cannot be serialized
            TransportError: If no response was obtained
            HttpError: If the response status is not 2xx
            DecodingError: If the response body is not valid JSON
        """
        method = HttpMethod.coerce(request.method())
        body = request.body()
        # Encoded before default_headers(), which may itself hit the network
        data = self.encode_body(body) if body else None

        url = self.resolve_base_url() + request.endpoint()
        headers = self.merge_headers(self.default_headers(), request.headers())
        if data is not None and "Content-Type" not in headers:
            headers["Content-Type"] = JSON_CONTENT_TYPE

        status, text, resp_headers = self.http.send(
            method=method.value,
            url=url,
            headers=dict(headers),
            data=data,
        )

        if not (200 <= status < 300):
            raise HttpError(status_code=status, body=text, headers=resp_headers)

        return self.decode_body(text)

    @staticmethod
    def merge_headers(
        defaults: Optional[Mapping[str, str]],
        overrides: Optional[Mapping[str, str]],
    ) -> CaseInsensitiveDict:
        """
        Merge request headers over default headers.

        Names compare case-insensitively; the winning side's spelling of the
        name is kept.
        """
        merged = CaseInsensitiveDict(defaults or {})
        merged.update(overrides or {})
        return merged

    @staticmethod
    def encode_body(body: Mapping[str, Any]) -> str:
        """Serialize a request body as strict JSON text."""
        try:
            return json.dumps(dict(body), allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            raise EncodingError(f"Failed to encode request body as JSON: {e}") from e

    @staticmethod
    def decode_body(text: str) -> Dict[str, Any]:
        """Decode response text into a dict."""
        if not text:
            return {}

        try:
            decoded = json.loads(text, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            raise DecodingError(f"Failed to parse JSON response: {e}", body=text) from e

        if isinstance(decoded, dict):
            return decoded

        return {"data": decoded}

    def close(self) -> None:
        """Close the underlying adapter."""
        self.http.close()

    def __enter__(self) -> "Connector":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

"""
Generic REST API connector.

Define typed requests and dispatch them through a connector that handles
header merging, JSON encoding, response decoding and error translation.
"""

from .__version__ import __version__
from .config import ConnectorConfig
from .connector import Connector
from .exceptions import (
    ConfigurationError,
    ConnectorError,
    DecodingError,
    EncodingError,
    HttpError,
    TransportError,
    TransportTimeoutError,
)
from .http import HTTPAdapter, HttpMethod, RequestsAdapter
from .request import BaseRequest, Request

__all__ = [
    "BaseRequest",
    "ConfigurationError",
    "Connector",
    "ConnectorConfig",
    "ConnectorError",
    "DecodingError",
    "EncodingError",
    "HTTPAdapter",
    "HttpError",
    "HttpMethod",
    "Request",
    "RequestsAdapter",
    "TransportError",
    "TransportTimeoutError",
    "__version__",
]

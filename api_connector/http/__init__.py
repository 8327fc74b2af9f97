"""
HTTP transport layer for the API connector.
"""

from .adapter import HTTPAdapter
from .method import HttpMethod
from .requests_adapter import RequestsAdapter

__all__ = ["HTTPAdapter", "HttpMethod", "RequestsAdapter"]

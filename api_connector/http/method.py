"""
HTTP method enumeration.
"""

from enum import Enum
from typing import Union


class HttpMethod(str, Enum):
    """Closed set of HTTP verbs accepted by the connector."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Union["HttpMethod", str]) -> "HttpMethod":
        """
        Convert a method token to a member.

        Args:
            value: HttpMethod member or verb string (any case)

        Returns:
            The matching HttpMethod

        Raises:
            ValueError: If the token is not one of the supported verbs
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {value!r}") from None

"""
Request contract.

A request describes one API call and nothing more. Any object providing
``endpoint()``, ``method()``, ``headers()`` and ``body()`` can be sent by a
connector; ``BaseRequest`` supplies empty defaults for the last two.

Examples:
    >>> @dataclass(frozen=True)
    ... class GetUserRequest(BaseRequest):
    ...     user_id: int
    ...
    ...     def endpoint(self) -> str:
    ...         return f"/users/{self.user_id}"
    ...
    ...     def method(self) -> HttpMethod:
    ...         return HttpMethod.GET
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Protocol, Union, runtime_checkable

from .http.method import HttpMethod


@runtime_checkable
class Request(Protocol):
    """Capabilities a connector needs from a request."""

    def endpoint(self) -> str:
        ...

    def method(self) -> Union[HttpMethod, str]:
        ...

    def headers(self) -> Mapping[str, str]:
        ...

    def body(self) -> Mapping[str, Any]:
        ...


class BaseRequest(ABC):
    """
    Convenience base for concrete requests.

    Subclasses implement ``endpoint`` and ``method``; ``headers`` and
    ``body`` default to empty mappings.
    """

    @abstractmethod
    def endpoint(self) -> str:
        """
        Endpoint path appended to the connector's base URL.

        Should start with a forward slash (e.g. ``/products/123``). Path
        parameters must already be URL-safe.
        """
        raise NotImplementedError

    @abstractmethod
    def method(self) -> Union[HttpMethod, str]:
        """HTTP method of this request."""
        raise NotImplementedError

    def headers(self) -> Dict[str, str]:
        """Request-specific headers, merged over the connector defaults."""
        return {}

    def body(self) -> Dict[str, Any]:
        """Request payload, encoded as JSON when non-empty."""
        return {}

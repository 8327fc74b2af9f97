"""
Base HTTP adapter interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple


class HTTPAdapter(ABC):
    """
    Abstract base class for HTTP adapters.

    The connector delegates the network exchange to an adapter so the
    transport can be swapped (or faked in tests).
    """

    @abstractmethod
    def send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[str] = None,
    ) -> Tuple[int, str, Dict[str, str]]:
        """
        Send HTTP request.

        Args:
            method: HTTP method (GET, POST, etc.)
            url: Request URL
            headers: Request headers
            data: Encoded request payload, if any

        Returns:
            Tuple of (status_code, response_text, response_headers)

        Raises:
            TransportError: When no response was obtained
            HttpError: If the adapter raises on 4xx/5xx statuses
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release transport resources."""

    def __enter__(self) -> "HTTPAdapter":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

"""
Prometheus metrics for transport exchanges.

Series are registered on the default prometheus_client registry; exposing it
is up to the host application.
"""

import logging
from typing import Union

from prometheus_client import Counter, Histogram

logger = logging.getLogger("api_connector.metrics")

# Exchanges by verb and outcome; code is "error" when no response arrived
TRANSPORT_REQUEST_COUNT = Counter(
    "api_connector_transport_requests_total",
    "HTTP exchanges performed by the transport adapter",
    ["method", "code"],
)

TRANSPORT_LATENCY = Histogram(
    "api_connector_transport_latency_seconds",
    "Wall time from dispatch to response (or failure) in seconds",
    ["method"],
)


def record_exchange(method: str, code: Union[int, str], latency: float) -> None:
    """
    Count one exchange and observe its latency.

    Called by ``RequestsAdapter.send`` once per dispatch, whether the exchange
    ended with a response or a transport failure.

    Args:
        method: HTTP verb sent on the wire
        code: Response status, or ``"error"`` for a transport failure
        latency: Seconds spent in the exchange

    Example:
        >>> record_exchange("PUT", 204, 0.084)
        >>> record_exchange("GET", "error", 5.0)  # connect timeout
    """
    try:
        TRANSPORT_REQUEST_COUNT.labels(method=method, code=str(code)).inc()
        TRANSPORT_LATENCY.labels(method=method).observe(latency)
    except Exception as e:
        # Never let bookkeeping fail an exchange
        logger.debug("Failed to record metrics: %s", e)

"""HTTP transport for JSON-RPC requests."""

from types import TracebackType
from typing import Any, Self

import httpx

from web3rpc.helpers.constants import (
    CONNECTION_TIMEOUT,
    DEFAULT_TIMEOUT,
    MAX_CONNECTIONS,
    MAX_KEEPALIVE_CONNECTIONS,
)
from web3rpc.helpers.http_models import JsonValue
from web3rpc.helpers.logging import get_logger


logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def create_http_client(timeout: float = DEFAULT_TIMEOUT, **kwargs: Any) -> httpx.Client:
    """Create a configured httpx Client.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        **kwargs: Additional httpx.Client kwargs

    Returns:
        Configured Client instance with pooled connections

    Example:
        ```python
        from web3rpc.helpers.http import create_http_client

        with create_http_client(timeout=60.0) as client:
            response = client.post("http://localhost:8545", content=b"...")
        ```
    """
    return httpx.Client(
        timeout=httpx.Timeout(timeout, connect=CONNECTION_TIMEOUT),
        limits=httpx.Limits(
            max_keepalive_connections=MAX_KEEPALIVE_CONNECTIONS,
            max_connections=MAX_CONNECTIONS,
        ),
        **kwargs,
    )


class HttpTransport:
    """Posts serialized JSON-RPC requests to a node over HTTP.

    The transport performs exactly one POST per ``send`` call. HTTP failures
    (connection errors, timeouts, non-2xx status codes) propagate as
    ``httpx.HTTPError`` subclasses; a body that is not JSON propagates as
    ``json.JSONDecodeError``.
    """

    def __init__(
        self,
        rpc_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            rpc_url: Ethereum JSON-RPC endpoint URL
            timeout: Request timeout in seconds, used when no client is given
            client: Optional pre-configured client; the caller keeps ownership

        Raises:
            ValueError: If rpc_url is empty or None
        """
        if not rpc_url:
            msg = "RPC URL cannot be empty"
            raise ValueError(msg)

        self.rpc_url = rpc_url
        self.timeout = timeout
        self._owns_client = client is None
        self._client = client if client is not None else create_http_client(timeout)

    def send(self, payload: bytes) -> JsonValue:
        """Post request bytes and return the decoded JSON body.

        Args:
            payload: Serialized JSON-RPC request

        Returns:
            Parsed JSON response body

        Raises:
            httpx.HTTPError: If the HTTP request fails
        """
        logger.debug("POST %s (%d bytes)", self.rpc_url, len(payload))
        response = self._client.post(self.rpc_url, content=payload, headers=JSON_HEADERS)
        response.raise_for_status()
        return response.json()

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


__all__ = [
    "HttpTransport",
    "create_http_client",
]

"""
HTTP transport used to retrieve raw data.

The rest of the package only needs "GET a path, get bytes back"; anything
with a matching `fetch` method can stand in for `HttpTransport`.
"""

import logging
from typing import Optional, Protocol

import httpx

from ..errors import RequestError

DEFAULT_TIMEOUT = 30.0


class Transport(Protocol):
    """Anything that can GET a path and return the raw response body."""

    def fetch(self, path: str) -> bytes:
        ...


class HttpTransport:
    """`Transport` backed by an `httpx.Client`.

    Paths are appended to `base_url`; an empty path requests `base_url`
    itself. No retries are attempted: every failure surfaces as a
    `RequestError` and the caller decides whether to try again.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the transport.

        Args:
            base_url: URL that request paths are appended to
            timeout: Request timeout in seconds (ignored when `client` is given)
            client: Preconfigured client to use instead of creating one
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.base_url = base_url
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def url_for(self, path: str) -> str:
        """Return the absolute URL for a request path."""
        if not path:
            return self.base_url
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def fetch(self, path: str) -> bytes:
        """GET a path and return the response body.

        Raises:
            RequestError: On connection errors, timeouts and non-2xx responses
        """
        url = self.url_for(path)
        self.logger.debug(f"GET {url}")
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            self.logger.error(f"Request to {url} failed: {e}")
            raise RequestError(f"Request to {url} failed: {e}", path=path) from e

        self.logger.debug(f"Received {len(response.content)} bytes from {url}")
        return response.content

    def close(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

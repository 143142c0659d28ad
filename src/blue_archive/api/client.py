"""
Client for the remote query API.

Unlike `BlueArchiveFetcher`, which downloads the full students document and
filters locally, this client asks the remote API directly and returns the
parsed JSON as-is.
"""

import logging
from typing import Any, Optional, TYPE_CHECKING, Union

from ..data.loaders import StudentLoader
from ..settings.api import DEFAULT_API_URL, DEFAULT_TIMEOUT
from .endpoints import Endpoint, EndpointArgument
from .query import Query
from .transport import HttpTransport, Transport

if TYPE_CHECKING:
    from ..settings import ClientSettings


class ApiClient:
    """Thin client issuing one request per call against the query API."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        settings: Optional["ClientSettings"] = None,
    ):
        """Initialize the client.

        Args:
            transport: Transport rooted at the API base URL. Defaults to an
                `HttpTransport` on the configured API URL.
            settings: Client settings for API URL and timeout.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._owned: Optional[HttpTransport] = None
        if transport is None:
            api_url = settings.api_url if settings else DEFAULT_API_URL
            timeout = settings.timeout if settings else DEFAULT_TIMEOUT
            self._owned = HttpTransport(api_url, timeout=timeout)
            transport = self._owned
        self.transport = transport
        self.loader = StudentLoader()

    def get(self, endpoint: Endpoint, argument: EndpointArgument = None) -> Any:
        """Request an endpoint and return the parsed JSON body.

        Raises:
            ValueError: If the endpoint does not accept the argument
            RequestError: If the request fails
            DeserializationError: If the body is not valid JSON
        """
        path = endpoint.path(argument)
        self.logger.debug(f"Requesting {endpoint.name} at '{path}'")
        return self.loader.parse_json(self.transport.fetch(path))

    def status(self) -> Any:
        return self.get(Endpoint.STATUS)

    def character(self, name: str) -> Any:
        return self.get(Endpoint.CHARACTER, name)

    def characters_by_query(self, query: Query) -> Any:
        return self.get(Endpoint.CHARACTER, query)

    def equipment(self, id_or_name: Union[int, str]) -> Any:
        return self.get(Endpoint.EQUIPMENT, id_or_name)

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owned is not None:
            self._owned.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

"""
Request paths of the remote Blue Archive API.
"""

from enum import Enum
from typing import Union

from .query import Query, escape_value

EndpointArgument = Union[str, int, Query, None]


class Endpoint(Enum):
    STATUS = "status"
    CHARACTER = "character"
    EQUIPMENT = "equipment"
    STAGE = "stage"
    RAID = "raid"
    BANNER = "banner"

    def path(self, argument: EndpointArgument = None) -> str:
        """Build the request path for this endpoint.

        Args:
            argument: For CHARACTER, an optional student name or a `Query`.
                For EQUIPMENT, a required equipment ID or name. Other
                endpoints take no argument.

        Returns:
            Path relative to the API base URL

        Raises:
            ValueError: If the argument is missing or not accepted here
        """
        if self is Endpoint.CHARACTER:
            if argument is None:
                return self.value
            if isinstance(argument, Query):
                return f"{self.value}/{argument.to_path()}"
            if isinstance(argument, str):
                return f"{self.value}/{escape_value(argument)}"
        elif self is Endpoint.EQUIPMENT:
            if isinstance(argument, str):
                return f"{self.value}/{escape_value(argument)}"
            if isinstance(argument, int) and not isinstance(argument, bool):
                return f"{self.value}/{argument}"
        elif argument is None:
            return self.value

        raise ValueError(f"Endpoint {self.name} does not accept argument {argument!r}")

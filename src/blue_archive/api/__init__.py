"""
Remote access: query predicates, request paths and HTTP transport.
"""

from .query import Query, QueryKind, escape_value, matches_all
from .endpoints import Endpoint
from .transport import HttpTransport, Transport
from .client import ApiClient

__all__ = [
    "Query",
    "QueryKind",
    "escape_value",
    "matches_all",
    "Endpoint",
    "Transport",
    "HttpTransport",
    "ApiClient",
]

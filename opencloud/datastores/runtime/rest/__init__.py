"""REST runtime abstractions."""

from .http_client import HTTPClient, RestResponse, prepare_query
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, remote_error

__all__ = [
    "HTTPClient",
    "RestResponse",
    "prepare_query",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "remote_error",
]

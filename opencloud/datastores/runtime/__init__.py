"""Runtime: HTTP execution, endpoint running and pagination."""

from .pages import Page, PageAdapter, Pages
from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestResponse, RestRunner

__all__ = [
    "HTTPClient",
    "RestResponse",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "Page",
    "PageAdapter",
    "Pages",
]

"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from ...core.exceptions import EntryNotFoundError, RateLimitError, RemoteCallError
from .http_client import HTTPClient, RestResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PATCH" | "DELETE"
    build_url: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    build_body: Callable[[dict[str, Any]], str | bytes | None] | None = None
    success_status: tuple[int, ...] = (200,)


class ResponseAdapter:
    def parse(self, response: RestResponse, params: dict[str, Any]) -> Any:
        return response


def remote_error(response: RestResponse) -> RemoteCallError:
    """Translate a non-success response into the matching RemoteCallError."""
    message = f"{response.status}: {response.reason}"
    if response.status == 404:
        return EntryNotFoundError(message, status_text=response.reason)
    if response.status == 429:
        retry_after = response.header("retry-after")
        return RateLimitError(
            message,
            status_text=response.reason,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else 60,
        )
    return RemoteCallError(message, status_code=response.status, status_text=response.reason)


class RestRunner:
    def __init__(self, client: HTTPClient) -> None:
        self._client = client

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        url = spec.build_url(params)
        query = spec.build_query(params) if spec.build_query else None
        headers = spec.build_headers(params) if spec.build_headers else None
        body = spec.build_body(params) if spec.build_body else None

        response = await self._client.request(
            spec.method, url, params=query, headers=headers, data=body
        )

        if response.status not in spec.success_status:
            logger.warning(
                "Endpoint returned non-success status",
                extra={"endpoint": spec.id, "status": response.status},
            )
            raise remote_error(response)

        return adapter.parse(response, params)

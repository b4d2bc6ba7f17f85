"""HTTP client helper."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT
from ...utils.parsing import parse_json

logger = logging.getLogger(__name__)

QueryValue = str | int | float | bool | None


@dataclass(frozen=True)
class RestResponse:
    """Snapshot of an HTTP response, read while the connection was open.

    Header names are stored lower-cased.
    """

    status: int
    reason: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    text: str = ""

    def header(self, name: str) -> str | None:
        return self.headers.get(name.lower())

    def json(self) -> Any:
        """Decode the body with the infinity-tolerant JSON parser."""
        return parse_json(self.text)


def prepare_query(params: Mapping[str, QueryValue] | None) -> dict[str, str]:
    """Convert query values to strings, dropping ``None`` and empty strings."""
    query: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None or value == "":
            continue
        if isinstance(value, bool):
            query[key] = "true" if value else "false"
        else:
            query[key] = str(value)
    return query


class HTTPClient:
    """Async HTTP client wrapper.

    Issues exactly one request per call; there is no retry and no status
    inspection here. Transport failures propagate as aiohttp raises them.
    """

    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, QueryValue] | None = None,
        headers: Mapping[str, str] | None = None,
        data: str | bytes | None = None,
    ) -> RestResponse:
        """Send a request and return the full response.

        Args:
            method: One of GET, POST, PATCH, DELETE
            url: Absolute URL without query string
            params: Query parameters; ``None``/empty values are omitted
            headers: Request headers
            data: Optional raw body

        Returns:
            RestResponse with status, reason, lower-cased headers and body text
        """
        query = prepare_query(params)
        async with self.session.request(
            method.upper(), url, params=query, headers=dict(headers or {}), data=data
        ) as response:
            text = await response.text()
            result = RestResponse(
                status=response.status,
                reason=response.reason or "",
                headers={k.lower(): v for k, v in response.headers.items()},
                text=text,
            )
        logger.debug(
            "HTTP request completed",
            extra={"method": method.upper(), "url": url, "status": result.status},
        )
        return result

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()

"""Header builders and helpers shared by every endpoint module."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..core.exceptions import ResponseDecodeError
from ..runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse


def api_key_headers(params: dict[str, Any]) -> dict[str, str]:
    """Authentication header sent with every call."""
    return {"x-api-key": params["api_key"]}


def json_headers(params: dict[str, Any]) -> dict[str, str]:
    return {**api_key_headers(params), "Content-Type": "application/json"}


def path_segment(value: Any) -> str:
    """Percent-encode a value for use as a single URL path segment."""
    return quote(str(value), safe="")


def decode_json(response: RestResponse) -> Any:
    try:
        return response.json()
    except ValueError as e:
        raise ResponseDecodeError(f"Response is not valid JSON: {e}") from e


class Registry:
    """Endpoint id -> (spec, adapter) lookup for one remote service."""

    def __init__(self, entries: dict[str, tuple[RestEndpointSpec, ResponseAdapter]]) -> None:
        self._entries = dict(entries)

    def ids(self) -> list[str]:
        return sorted(self._entries)

    def get_endpoint_spec(self, endpoint_id: str) -> RestEndpointSpec | None:
        """Get endpoint definition by ID."""
        entry = self._entries.get(endpoint_id)
        return entry[0] if entry else None

    def get_endpoint_adapter(self, endpoint_id: str) -> ResponseAdapter | None:
        """Get endpoint adapter by ID."""
        entry = self._entries.get(endpoint_id)
        return entry[1] if entry else None

"""Shared plumbing for the public service handles."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from ..connectors.common import Registry
from ..runtime.pages import PageAdapter, Pages
from ..runtime.rest import ResponseAdapter, RestEndpointSpec

if TYPE_CHECKING:
    from .universe import Universe


class ServiceHandle:
    """A stateless handle bound to a universe and one service registry.

    Every call builds its own request params; nothing is cached between calls.
    """

    registry: ClassVar[Registry]

    def __init__(self, universe: Universe) -> None:
        self.universe = universe

    def _params(self, **extra: Any) -> dict[str, Any]:
        return {
            "universe_id": self.universe.id,
            "api_key": self.universe.api_key,
            **extra,
        }

    def _endpoint(self, endpoint_id: str) -> tuple[RestEndpointSpec, ResponseAdapter]:
        spec = self.registry.get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")
        adapter = self.registry.get_endpoint_adapter(endpoint_id)
        if adapter is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")
        return spec, adapter

    async def _fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        spec, adapter = self._endpoint(endpoint_id)
        return await self.universe.runner.run(spec=spec, adapter=adapter, params=params)

    def _pages(self, endpoint_id: str, params: dict[str, Any]) -> Pages[Any]:
        spec, adapter = self._endpoint(endpoint_id)
        if not isinstance(adapter, PageAdapter):
            raise ValueError(f"Endpoint is not a listing: {endpoint_id}")
        return Pages(self.universe.runner, spec, adapter, params)

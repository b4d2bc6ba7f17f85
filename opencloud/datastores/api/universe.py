"""Universe handle: the entry point of the library.

A universe (also called an experience or game) is a collection of places
sharing data stores. A Universe handle is identified by (id, api_key) and
owns the HTTP client used by every store, place and messaging handle
derived from it.

Example:
    >>> async with Universe(123456, "api-key") as universe:
    ...     store = universe.get_data_store("Inventory")
    ...     version = await store.set("player_1", {"gold": 10})
    ...     value, info = await store.get("player_1")
"""

from __future__ import annotations

import os

from ..config import DEFAULT_SCOPE, DEFAULT_TIMEOUT, ENV_API_KEY, ENV_UNIVERSE_ID
from ..core.exceptions import ValidationError
from ..models import DataStoreInfo, DataStoreOptions
from ..runtime.pages import Pages
from ..runtime.rest import HTTPClient, RestRunner
from ..utils.validation import must_be_integer, must_be_string
from .data_store import DataStore, DataStoreDirectory
from .messaging import MessagingService
from .ordered_data_store import OrderedDataStore
from .place import Place


class Universe:
    """Handle on a universe, authenticated with an API key."""

    def __init__(
        self,
        id: int,
        api_key: str,
        *,
        client: HTTPClient | None = None,
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Args:
            id: Universe id (not a place id)
            api_key: API key sent as ``x-api-key`` with every call
            client: Optional HTTP client; one is created (and owned) if omitted
            timeout: Optional total deadline in seconds for a created client; none by default
        """
        must_be_integer("UniverseId", id)
        must_be_string("ApiKey", api_key)
        self.id = id
        self.api_key = api_key
        self._owns_client = client is None
        self._client = client or HTTPClient(timeout=timeout)
        self.runner = RestRunner(self._client)
        self._directory = DataStoreDirectory(self)

    @classmethod
    def from_env(cls, *, client: HTTPClient | None = None) -> Universe:
        """Build from ``OPENCLOUD_UNIVERSE_ID`` and ``OPENCLOUD_API_KEY``."""
        raw_id = os.environ.get(ENV_UNIVERSE_ID)
        api_key = os.environ.get(ENV_API_KEY)
        if not raw_id or not api_key:
            raise ValidationError(f"{ENV_UNIVERSE_ID} and {ENV_API_KEY} must be set")
        try:
            universe_id = int(raw_id)
        except ValueError:
            raise ValidationError(f"{ENV_UNIVERSE_ID} must be an integer") from None
        return cls(universe_id, api_key, client=client)

    def __repr__(self) -> str:
        return f"Universe(id={self.id})"

    def list_data_stores(self, prefix: str = "", page_size: int = 50) -> Pages[DataStoreInfo]:
        """Enumerate the universe's data stores, optionally by name ``prefix``."""
        return self._directory.list_stores(prefix, page_size)

    def get_data_store(
        self,
        name: str,
        scope: str = DEFAULT_SCOPE,
        options: DataStoreOptions | None = None,
    ) -> DataStore:
        return DataStore(self, name, scope, options)

    def get_ordered_data_store(self, name: str, scope: str = DEFAULT_SCOPE) -> OrderedDataStore:
        return OrderedDataStore(self, name, scope)

    def get_place(self, place_id: int) -> Place:
        return Place(self, place_id)

    def get_messaging_service(self) -> MessagingService:
        return MessagingService(self)

    async def close(self) -> None:
        """Close the HTTP client if this universe created it."""
        if self._owns_client:
            await self._client.close()

    async def __aenter__(self) -> Universe:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


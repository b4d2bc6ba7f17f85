"""Ordered data store handle.

Entries hold a single number and can be listed sorted by value, e.g. for
leaderboards. No version history is exposed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..config import DEFAULT_SCOPE
from ..connectors.ordered.endpoints import REGISTRY
from ..models import OrderedEntry
from ..runtime.pages import Pages
from ..utils.validation import check_page_size, must_be_integer, must_be_number, must_be_string
from .base import ServiceHandle

if TYPE_CHECKING:
    from .universe import Universe

logger = logging.getLogger(__name__)

Number = int | float


class OrderedDataStore(ServiceHandle):
    """Handle on one (name, scope) of a universe's ordered data stores."""

    registry = REGISTRY

    def __init__(self, universe: Universe, name: str, scope: str = DEFAULT_SCOPE) -> None:
        must_be_string("Name", name)
        must_be_string("Scope", scope)
        super().__init__(universe)
        self.name = name
        self.scope = scope

    def __repr__(self) -> str:
        return f"OrderedDataStore(name={self.name!r}, scope={self.scope!r})"

    def _entry_params(self, key: str, **extra: Any) -> dict[str, Any]:
        return self._params(datastore_name=self.name, scope=self.scope, key=key, **extra)

    def get_sorted(
        self,
        ascending: bool = True,
        page_size: int = 50,
        filter: str | None = None,
    ) -> Pages[OrderedEntry]:
        """List entries sorted by value.

        Args:
            ascending: Smallest values first when True
            page_size: Items per page (at most 50)
            filter: Optional value range filter, e.g. ``"entry >= 10 && entry <= 50"``
        """
        check_page_size(page_size)
        if filter is not None:
            must_be_string("Filter", filter)
        params = self._params(
            datastore_name=self.name,
            scope=self.scope,
            order_by="asc" if ascending else "desc",
            limit=page_size,
            filter=filter,
        )
        return self._pages("list_entries", params)

    async def get(self, key: str) -> Number:
        """Return the value stored under ``key``.

        Raises:
            EntryNotFoundError: The entry does not exist
        """
        must_be_string("Key", key)
        entry: OrderedEntry = await self._fetch("get_entry", self._entry_params(key))
        return entry.value

    async def set(self, key: str, value: Number) -> None:
        """Create or overwrite the entry ``key``."""
        must_be_string("Key", key)
        must_be_number("Value", value)
        await self._fetch(
            "update_entry", self._entry_params(key, value=value, allow_missing=True)
        )

    async def remove(self, key: str) -> None:
        must_be_string("Key", key)
        await self._fetch("delete_entry", self._entry_params(key))

    async def update(
        self, key: str, transform: Callable[[Number], Number | None]
    ) -> Number | None:
        """Read-modify-write the value of ``key``.

        ``transform`` receives the current value. When it returns a number,
        that number is written back with ``allow_missing=False`` (the write
        fails if the entry was removed meanwhile) and the stored value is
        returned. Any other return value skips the write and returns None.

        Not atomic: a concurrent write by another client between the read
        and the write is overwritten without detection.
        """
        must_be_string("Key", key)
        current = await self.get(key)
        result = transform(current)
        if isinstance(result, bool) or not isinstance(result, int | float):
            logger.debug("Update skipped: transform returned no number", extra={"key": key})
            return None

        must_be_number("Value", result)
        entry: OrderedEntry = await self._fetch(
            "update_entry", self._entry_params(key, value=result, allow_missing=False)
        )
        return entry.value

    async def increment(self, key: str, delta: int) -> Number:
        """Increment ``key`` by ``delta`` and return the value from the response."""
        must_be_string("Key", key)
        must_be_integer("Delta", delta)
        entry: OrderedEntry = await self._fetch(
            "increment_entry", self._entry_params(key, delta=delta)
        )
        return entry.value

"""Standard data store handle.

Lets a caller store data that persists between sessions. Data stores are
shared per universe, so every place and server of a universe reads and
writes the same entries. Every write creates a new immutable version;
removal writes a tombstone version rather than erasing history.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ..config import DEFAULT_SCOPE, MAX_ENTRY_BYTES
from ..connectors.standard.endpoints import REGISTRY
from ..core.enums import SortDirection
from ..core.exceptions import ValidationError
from ..models import (
    DataStoreInfo,
    DataStoreKeyInfo,
    DataStoreOptions,
    DataStoreSetOptions,
    EntryKeyInfo,
    EntryVersionInfo,
)
from ..runtime.pages import Pages
from ..utils.parsing import dump_json, millis_to_iso
from ..utils.validation import check_page_size, must_be_integer, must_be_string
from .base import ServiceHandle

if TYPE_CHECKING:
    from .universe import Universe

logger = logging.getLogger(__name__)


def _user_ids_json(user_ids: Iterable[int]) -> str:
    ids = list(user_ids)
    for user_id in ids:
        must_be_integer("UserId", user_id)
    return dump_json(ids, ascii_only=True)


def _attributes_json(options: DataStoreSetOptions | None) -> str | None:
    if options is None:
        return None
    return dump_json(options.get_metadata(), ascii_only=True)


class DataStore(ServiceHandle):
    """Handle on one (name, scope) of a universe's standard data stores.

    Missing keys: ``get`` (and therefore ``increment``/``remove``) raises
    EntryNotFoundError when the key does not exist or its latest version is a
    tombstone; no sentinel pair is returned.
    """

    registry = REGISTRY

    def __init__(
        self,
        universe: Universe,
        name: str,
        scope: str = DEFAULT_SCOPE,
        options: DataStoreOptions | None = None,
    ) -> None:
        """
        Args:
            universe: Universe the data store belongs to
            name: Name of the data store
            scope: Scope within the data store
            options: Handle options (``all_scopes`` for key listing)
        """
        must_be_string("Name", name)
        must_be_string("Scope", scope)
        super().__init__(universe)
        self.name = name
        self.scope = scope
        self.options = options or DataStoreOptions()

    def __repr__(self) -> str:
        return f"DataStore(name={self.name!r}, scope={self.scope!r})"

    def _entry_params(self, key: str, **extra: Any) -> dict[str, Any]:
        return self._params(
            datastore_name=self.name, scope=self.scope, key=key, **extra
        )

    async def get(self, key: str) -> tuple[Any, DataStoreKeyInfo]:
        """Return the latest value of ``key`` and its DataStoreKeyInfo.

        Raises:
            EntryNotFoundError: Key is missing or its latest version is deleted
        """
        must_be_string("Key", key)
        return await self._fetch("get_entry", self._entry_params(key))

    async def set(
        self,
        key: str,
        value: Any,
        user_ids: Iterable[int] = (),
        options: DataStoreSetOptions | None = None,
        *,
        match_version: str | None = None,
        exclusive_create: bool = False,
    ) -> str:
        """Set the latest value, user ids and metadata of ``key``.

        Metadata must be passed on every write, even when unchanged,
        otherwise the stored metadata is lost.

        Args:
            key: Key to write
            value: JSON-serializable value, under 4 MB once serialized
            user_ids: User ids to associate with the entry
            options: Custom metadata for the entry
            match_version: Only write if the current version matches
            exclusive_create: Only write if the entry does not exist yet

        Returns:
            Version identifier of the newly created version
        """
        must_be_string("Key", key)
        if value is None:
            raise ValidationError("Value cannot be empty")
        if match_version is not None and exclusive_create:
            raise ValidationError("matchVersion and exclusiveCreate cannot be used together")
        if match_version is not None:
            must_be_string("MatchVersion", match_version)

        try:
            body = dump_json(value).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Value is not JSON-serializable: {e}") from e
        if len(body) >= MAX_ENTRY_BYTES:
            raise ValidationError("Value cannot be larger than 4MB")

        params = self._entry_params(
            key,
            body=body,
            user_ids_json=_user_ids_json(user_ids),
            attributes_json=_attributes_json(options),
            match_version=match_version,
            exclusive_create=exclusive_create,
        )
        info: EntryVersionInfo = await self._fetch("set_entry", params)
        logger.debug("Entry set", extra={"datastore": self.name, "version": info.version})
        return info.version

    async def increment(
        self,
        key: str,
        delta: int,
        user_ids: Iterable[int] = (),
        options: DataStoreSetOptions | None = None,
    ) -> tuple[Any, DataStoreKeyInfo]:
        """Increment the integer value of ``key`` by ``delta``.

        The increment response is discarded; the result comes from a
        follow-up ``get`` so the returned value and metadata are the stored
        ones. That is two round trips.
        """
        must_be_string("Key", key)
        must_be_integer("Delta", delta)

        params = self._entry_params(
            key,
            delta=delta,
            user_ids_json=_user_ids_json(user_ids),
            attributes_json=_attributes_json(options),
        )
        await self._fetch("increment_entry", params)
        return await self.get(key)

    async def remove(self, key: str) -> tuple[Any, DataStoreKeyInfo]:
        """Mark ``key`` as deleted by writing a tombstone version.

        Returns:
            The value and DataStoreKeyInfo read just before deletion
        """
        must_be_string("Key", key)
        previous = await self.get(key)
        await self._fetch("delete_entry", self._entry_params(key))
        logger.debug("Entry removed", extra={"datastore": self.name})
        return previous

    def list_keys(self, prefix: str = "", page_size: int = 50) -> Pages[EntryKeyInfo]:
        """Enumerate the keys of the data store, optionally by ``prefix``."""
        must_be_string("Prefix", prefix)
        check_page_size(page_size)
        params = self._params(
            datastore_name=self.name,
            scope=self.scope,
            all_scopes=self.options.all_scopes,
            prefix=prefix,
            limit=page_size,
        )
        return self._pages("list_entries", params)

    def list_versions(
        self,
        key: str,
        sort_direction: SortDirection | str = SortDirection.ASCENDING,
        min_date: int = 0,
        max_date: int = 0,
        page_size: int = 50,
    ) -> Pages[EntryVersionInfo]:
        """Enumerate versions of ``key``.

        Args:
            key: Key whose versions to list
            sort_direction: Ascending (older first) or Descending
            min_date: Epoch millis; skip versions older than this (0 = unbounded)
            max_date: Epoch millis; skip versions younger than this (0 = unbounded)
            page_size: Items per page (at most 50)
        """
        must_be_string("Key", key)
        must_be_integer("MinDate", min_date)
        must_be_integer("MaxDate", max_date)
        check_page_size(page_size)
        try:
            direction = SortDirection(sort_direction)
        except ValueError:
            raise ValidationError(
                "SortDirection must be either Ascending or Descending"
            ) from None

        params = self._entry_params(
            key,
            sort_order=direction.value,
            start_time=millis_to_iso(min_date) if min_date else None,
            end_time=millis_to_iso(max_date) if max_date else None,
            limit=page_size,
        )
        return self._pages("list_versions", params)

    async def get_version(self, key: str, version: str) -> tuple[Any, DataStoreKeyInfo]:
        """Return the value of ``key`` at ``version`` and its DataStoreKeyInfo."""
        must_be_string("Key", key)
        must_be_string("Version", version)
        return await self._fetch(
            "get_version", self._entry_params(key, version=version)
        )


class DataStoreDirectory(ServiceHandle):
    """Enumerates the standard data stores of a universe."""

    registry = REGISTRY

    def list_stores(self, prefix: str = "", page_size: int = 50) -> Pages[DataStoreInfo]:
        must_be_string("Prefix", prefix)
        check_page_size(page_size)
        return self._pages("list_datastores", self._params(prefix=prefix, limit=page_size))

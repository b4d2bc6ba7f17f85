"""Cursor-driven pagination over list endpoints.

Architecture:
    A Pages instance wraps one list endpoint: a RestEndpointSpec, the fixed
    request params baked in when the listing was created, and a PageAdapter
    naming the response fields that carry the items and the next cursor.
    Each advance issues exactly one request through the RestRunner.

State machine:
    - unfetched: no page loaded yet; get_current_page() loads the first one
    - open: a page is loaded and a next cursor is held
    - finished: the last response had no next cursor; further advances raise
      TerminalPageError

    A failed advance (remote error or undecodable body) leaves the items,
    the cursor and is_finished untouched.

Concurrency:
    One advance at a time per instance. Two tasks advancing the same Pages
    concurrently race on the cursor; serializing them is up to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ResponseDecodeError, TerminalPageError
from .rest.http_client import RestResponse
from .rest.runner import ResponseAdapter, RestEndpointSpec, RestRunner

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """One decoded list response.

    ``items`` is None when the response omitted the item field entirely.
    """

    items: list[T] | None
    next_cursor: str | None


class PageAdapter(ResponseAdapter, Generic[T]):
    """Decode a list envelope ``{<item_field>: [...], <cursor_field>: str | null}``."""

    def __init__(
        self,
        item_field: str,
        item_type: type[T],
        cursor_field: str = "nextPageCursor",
    ) -> None:
        self.item_field = item_field
        self.cursor_field = cursor_field
        self._items = TypeAdapter(list[item_type])

    def parse(self, response: RestResponse, params: dict[str, Any]) -> Page[T]:
        try:
            data = response.json()
        except ValueError as e:
            raise ResponseDecodeError(f"List response is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"Invalid list response: expected object, got {type(data).__name__}"
            )

        raw_items = data.get(self.item_field)
        try:
            items = self._items.validate_python(raw_items) if raw_items is not None else None
        except PydanticValidationError as e:
            raise ResponseDecodeError(f"Invalid '{self.item_field}' in list response: {e}") from e

        cursor = data.get(self.cursor_field)
        if cursor is not None and not isinstance(cursor, str):
            raise ResponseDecodeError(f"Invalid '{self.cursor_field}' in list response")
        return Page(items=items, next_cursor=cursor or None)


class Pages(Generic[T]):
    """Lazy cursor pager over a single list endpoint."""

    def __init__(
        self,
        runner: RestRunner,
        spec: RestEndpointSpec,
        adapter: PageAdapter[T],
        params: dict[str, Any],
    ) -> None:
        self._runner = runner
        self._spec = spec
        self._adapter = adapter
        self._params = dict(params)
        self._items: list[T] = []
        self._cursor: str | None = None
        self._fetched = False
        #: Whether the current page is the last page available.
        self.is_finished = False

    @property
    def cursor(self) -> str | None:
        """Opaque cursor for the next request; never parse it."""
        return self._cursor

    async def get_current_page(self) -> list[T]:
        """Return the items of the current page, loading the first page if needed."""
        if not self._fetched and self._cursor is None:
            await self.advance_to_next_page()
        return self._items

    async def advance_to_next_page(self) -> None:
        """Fetch the next page.

        Raises:
            TerminalPageError: The last page has already been reached
            RemoteCallError: The list request failed; state is unchanged
            ResponseDecodeError: The response could not be decoded; state is unchanged
        """
        if self.is_finished:
            raise TerminalPageError("Next page was not found")

        params = dict(self._params)
        if self._cursor is not None:
            params["cursor"] = self._cursor

        page: Page[T] = await self._runner.run(spec=self._spec, adapter=self._adapter, params=params)

        self._fetched = True
        if page.items is not None:
            self._items = page.items

        if page.next_cursor is None:
            self.is_finished = True
        else:
            self._cursor = page.next_cursor

        logger.debug(
            "Advanced page",
            extra={
                "endpoint": self._spec.id,
                "items": len(self._items),
                "finished": self.is_finished,
            },
        )

    async def __aiter__(self) -> AsyncIterator[T]:
        """Yield every item from the current page onwards, advancing as needed."""
        for item in await self.get_current_page():
            yield item
        while not self.is_finished:
            previous = self._items
            await self.advance_to_next_page()
            # An omitted item field keeps the old list; don't yield it twice
            if self._items is previous:
                continue
            for item in self._items:
                yield item

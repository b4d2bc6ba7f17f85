"""Ordered data store entry endpoints.

Unlike the standard store, values travel in JSON bodies (``{"value": n}``
in, ``{path, id, value}`` out) and increments go to ``<entry>:increment``.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from opencloud.datastores.config import ORDERED_DATA_STORE_URL
from opencloud.datastores.core.exceptions import ResponseDecodeError
from opencloud.datastores.models import OrderedEntry
from opencloud.datastores.runtime.pages import PageAdapter
from opencloud.datastores.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse
from opencloud.datastores.utils.parsing import dump_json

from ...common import api_key_headers, decode_json, json_headers, path_segment


def entries_url(params: dict[str, Any]) -> str:
    return (
        f"{ORDERED_DATA_STORE_URL}/{params['universe_id']}"
        f"/orderedDataStores/{path_segment(params['datastore_name'])}"
        f"/scopes/{path_segment(params['scope'])}/entries"
    )


def entry_url(params: dict[str, Any]) -> str:
    return f"{entries_url(params)}/{path_segment(params['key'])}"


def increment_url(params: dict[str, Any]) -> str:
    return f"{entry_url(params)}:increment"


def list_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "max_page_size": params.get("limit"),
        "page_token": params.get("cursor"),
        "order_by": params.get("order_by"),
        "filter": params.get("filter"),
    }


def update_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"allow_missing": params["allow_missing"]}


def update_body(params: dict[str, Any]) -> str:
    return dump_json({"value": params["value"]})


def increment_body(params: dict[str, Any]) -> str:
    return dump_json({"amount": params["delta"]})


LIST_SPEC = RestEndpointSpec(
    id="list_entries",
    method="GET",
    build_url=entries_url,
    build_query=list_query,
    build_headers=api_key_headers,
)

GET_SPEC = RestEndpointSpec(
    id="get_entry",
    method="GET",
    build_url=entry_url,
    build_headers=api_key_headers,
)

UPDATE_SPEC = RestEndpointSpec(
    id="update_entry",
    method="PATCH",
    build_url=entry_url,
    build_query=update_query,
    build_headers=json_headers,
    build_body=update_body,
)

INCREMENT_SPEC = RestEndpointSpec(
    id="increment_entry",
    method="POST",
    build_url=increment_url,
    build_headers=json_headers,
    build_body=increment_body,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_entry",
    method="DELETE",
    build_url=entry_url,
    build_headers=api_key_headers,
    success_status=(200, 204),
)


class EntryAdapter(ResponseAdapter):
    """Decode a ``{path, id, value}`` body."""

    def parse(self, response: RestResponse, params: dict[str, Any]) -> OrderedEntry:
        try:
            return OrderedEntry.model_validate(decode_json(response))
        except PydanticValidationError as e:
            raise ResponseDecodeError(f"Invalid ordered entry response: {e}") from e


LIST_ADAPTER = PageAdapter("entries", OrderedEntry, cursor_field="nextPageToken")

"""Standard data store entry endpoints.

Entry values travel as the raw JSON body; versioning information travels in
``roblox-entry-*`` headers (see DataStoreKeyInfo).
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from opencloud.datastores.core.exceptions import ResponseDecodeError
from opencloud.datastores.models import DataStoreKeyInfo, EntryKeyInfo, EntryVersionInfo
from opencloud.datastores.models.key_info import ATTRIBUTES_HEADER, USER_IDS_HEADER
from opencloud.datastores.runtime.pages import PageAdapter
from opencloud.datastores.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse
from opencloud.datastores.utils.parsing import checksum

from ...common import api_key_headers, decode_json
from .datastores import base_url


def entries_url(params: dict[str, Any]) -> str:
    return f"{base_url(params)}/datastore/entries"


def entry_url(params: dict[str, Any]) -> str:
    return f"{entries_url(params)}/entry"


def increment_url(params: dict[str, Any]) -> str:
    return f"{entry_url(params)}/increment"


def entry_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "datastoreName": params["datastore_name"],
        "scope": params.get("scope"),
        "entryKey": params["key"],
    }


def list_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "datastoreName": params["datastore_name"],
        "scope": params.get("scope"),
        "AllScopes": params.get("all_scopes") or None,
        "prefix": params.get("prefix"),
        "limit": params.get("limit"),
        "cursor": params.get("cursor"),
    }


def set_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        **entry_query(params),
        "matchVersion": params.get("match_version"),
        "exclusiveCreate": params.get("exclusive_create") or None,
    }


def increment_query(params: dict[str, Any]) -> dict[str, Any]:
    return {**entry_query(params), "incrementBy": params["delta"]}


def write_headers(params: dict[str, Any]) -> dict[str, str]:
    """Headers for set/increment: user ids and optional custom metadata."""
    headers = {
        **api_key_headers(params),
        USER_IDS_HEADER: params["user_ids_json"],
    }
    if params.get("attributes_json") is not None:
        headers[ATTRIBUTES_HEADER] = params["attributes_json"]
    return headers


def set_headers(params: dict[str, Any]) -> dict[str, str]:
    return {
        **write_headers(params),
        "Content-Type": "application/json",
        "content-md5": checksum(params["body"]),
    }


def set_body(params: dict[str, Any]) -> bytes:
    return params["body"]


GET_SPEC = RestEndpointSpec(
    id="get_entry",
    method="GET",
    build_url=entry_url,
    build_query=entry_query,
    build_headers=api_key_headers,
)

SET_SPEC = RestEndpointSpec(
    id="set_entry",
    method="POST",
    build_url=entry_url,
    build_query=set_query,
    build_headers=set_headers,
    build_body=set_body,
)

INCREMENT_SPEC = RestEndpointSpec(
    id="increment_entry",
    method="POST",
    build_url=increment_url,
    build_query=increment_query,
    build_headers=write_headers,
)

DELETE_SPEC = RestEndpointSpec(
    id="delete_entry",
    method="DELETE",
    build_url=entry_url,
    build_query=entry_query,
    build_headers=api_key_headers,
    success_status=(204,),
)

LIST_SPEC = RestEndpointSpec(
    id="list_entries",
    method="GET",
    build_url=entries_url,
    build_query=list_query,
    build_headers=api_key_headers,
)


class EntryAdapter(ResponseAdapter):
    """Decode an entry body into ``(value, DataStoreKeyInfo)``."""

    def parse(self, response: RestResponse, params: dict[str, Any]) -> tuple[Any, DataStoreKeyInfo]:
        return decode_json(response), DataStoreKeyInfo.from_response(response)


class SetEntryAdapter(ResponseAdapter):
    """Decode the version record created by a write."""

    def parse(self, response: RestResponse, params: dict[str, Any]) -> EntryVersionInfo:
        try:
            return EntryVersionInfo.model_validate(decode_json(response))
        except PydanticValidationError as e:
            raise ResponseDecodeError(f"Invalid set entry response: {e}") from e


LIST_ADAPTER = PageAdapter("keys", EntryKeyInfo)

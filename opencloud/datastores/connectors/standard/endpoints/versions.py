"""Entry version listing and retrieval endpoints."""

from __future__ import annotations

from typing import Any

from opencloud.datastores.models import EntryVersionInfo
from opencloud.datastores.runtime.pages import PageAdapter
from opencloud.datastores.runtime.rest import RestEndpointSpec

from ...common import api_key_headers
from .entries import entry_query, entry_url


def versions_url(params: dict[str, Any]) -> str:
    return f"{entry_url(params)}/versions"


def version_url(params: dict[str, Any]) -> str:
    return f"{versions_url(params)}/version"


def list_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        **entry_query(params),
        "sortOrder": params.get("sort_order"),
        "startTime": params.get("start_time"),
        "endTime": params.get("end_time"),
        "limit": params.get("limit"),
        "cursor": params.get("cursor"),
    }


def version_query(params: dict[str, Any]) -> dict[str, Any]:
    return {**entry_query(params), "versionId": params["version"]}


LIST_SPEC = RestEndpointSpec(
    id="list_versions",
    method="GET",
    build_url=versions_url,
    build_query=list_query,
    build_headers=api_key_headers,
)

GET_SPEC = RestEndpointSpec(
    id="get_version",
    method="GET",
    build_url=version_url,
    build_query=version_query,
    build_headers=api_key_headers,
)

LIST_ADAPTER = PageAdapter("versions", EntryVersionInfo)

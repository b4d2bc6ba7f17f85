"""Data store listing endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from opencloud.datastores.config import DATA_STORE_URL
from opencloud.datastores.models import DataStoreInfo
from opencloud.datastores.runtime.pages import PageAdapter
from opencloud.datastores.runtime.rest import RestEndpointSpec

from ...common import api_key_headers


def base_url(params: dict[str, Any]) -> str:
    return f"{DATA_STORE_URL}/{params['universe_id']}/standard-datastores"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {
        "prefix": params.get("prefix"),
        "limit": params.get("limit"),
        "cursor": params.get("cursor"),
    }


LIST_SPEC = RestEndpointSpec(
    id="list_datastores",
    method="GET",
    build_url=base_url,
    build_query=build_query,
    build_headers=api_key_headers,
)

LIST_ADAPTER = PageAdapter("datastores", DataStoreInfo)

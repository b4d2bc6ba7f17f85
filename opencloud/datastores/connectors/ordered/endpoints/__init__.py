"""Ordered data store REST endpoint registry."""

from __future__ import annotations

from opencloud.datastores.runtime.rest import ResponseAdapter

from ...common import Registry
from . import entries

REGISTRY = Registry(
    {
        "list_entries": (entries.LIST_SPEC, entries.LIST_ADAPTER),
        "get_entry": (entries.GET_SPEC, entries.EntryAdapter()),
        "update_entry": (entries.UPDATE_SPEC, entries.EntryAdapter()),
        "increment_entry": (entries.INCREMENT_SPEC, entries.EntryAdapter()),
        "delete_entry": (entries.DELETE_SPEC, ResponseAdapter()),
    }
)

get_endpoint_spec = REGISTRY.get_endpoint_spec
get_endpoint_adapter = REGISTRY.get_endpoint_adapter

"""Standard data store REST endpoint registry."""

from __future__ import annotations

from opencloud.datastores.runtime.rest import ResponseAdapter

from ...common import Registry
from . import datastores, entries, versions

REGISTRY = Registry(
    {
        "list_datastores": (datastores.LIST_SPEC, datastores.LIST_ADAPTER),
        "list_entries": (entries.LIST_SPEC, entries.LIST_ADAPTER),
        "get_entry": (entries.GET_SPEC, entries.EntryAdapter()),
        "set_entry": (entries.SET_SPEC, entries.SetEntryAdapter()),
        "increment_entry": (entries.INCREMENT_SPEC, ResponseAdapter()),
        "delete_entry": (entries.DELETE_SPEC, ResponseAdapter()),
        "list_versions": (versions.LIST_SPEC, versions.LIST_ADAPTER),
        "get_version": (versions.GET_SPEC, entries.EntryAdapter()),
    }
)

get_endpoint_spec = REGISTRY.get_endpoint_spec
get_endpoint_adapter = REGISTRY.get_endpoint_adapter

"""Messaging service REST endpoint registry."""

from __future__ import annotations

from opencloud.datastores.runtime.rest import ResponseAdapter

from ...common import Registry
from . import topics

REGISTRY = Registry({"publish": (topics.PUBLISH_SPEC, ResponseAdapter())})

get_endpoint_spec = REGISTRY.get_endpoint_spec
get_endpoint_adapter = REGISTRY.get_endpoint_adapter

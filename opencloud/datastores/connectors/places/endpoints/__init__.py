"""Place management REST endpoint registry."""

from __future__ import annotations

from ...common import Registry
from . import versions

REGISTRY = Registry({"push_version": (versions.PUSH_SPEC, versions.Adapter())})

get_endpoint_spec = REGISTRY.get_endpoint_spec
get_endpoint_adapter = REGISTRY.get_endpoint_adapter

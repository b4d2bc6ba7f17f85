"""Messaging topic publish endpoint definition."""

from __future__ import annotations

from typing import Any

from opencloud.datastores.config import MESSAGING_SERVICE_URL
from opencloud.datastores.runtime.rest import RestEndpointSpec
from opencloud.datastores.utils.parsing import dump_json

from ...common import json_headers, path_segment


def build_url(params: dict[str, Any]) -> str:
    return f"{MESSAGING_SERVICE_URL}/{params['universe_id']}/topics/{path_segment(params['topic'])}"


def build_body(params: dict[str, Any]) -> str:
    return dump_json({"message": params["message"]})


PUBLISH_SPEC = RestEndpointSpec(
    id="publish",
    method="POST",
    build_url=build_url,
    build_headers=json_headers,
    build_body=build_body,
)

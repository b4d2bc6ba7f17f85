"""Place version push endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from opencloud.datastores.config import PLACE_MANAGEMENT_URL
from opencloud.datastores.core.exceptions import ResponseDecodeError
from opencloud.datastores.models import PlaceVersion
from opencloud.datastores.runtime.rest import ResponseAdapter, RestEndpointSpec, RestResponse

from ...common import api_key_headers, decode_json


def build_url(params: dict[str, Any]) -> str:
    return f"{PLACE_MANAGEMENT_URL}/{params['universe_id']}/places/{params['place_id']}/versions"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"versionType": params["version_type"]}


def build_headers(params: dict[str, Any]) -> dict[str, str]:
    return {**api_key_headers(params), "Content-Type": "application/octet-stream"}


def build_body(params: dict[str, Any]) -> bytes:
    return params["data"]


PUSH_SPEC = RestEndpointSpec(
    id="push_version",
    method="POST",
    build_url=build_url,
    build_query=build_query,
    build_headers=build_headers,
    build_body=build_body,
)


class Adapter(ResponseAdapter):
    def parse(self, response: RestResponse, params: dict[str, Any]) -> PlaceVersion:
        try:
            return PlaceVersion.model_validate(decode_json(response))
        except PydanticValidationError as e:
            raise ResponseDecodeError(f"Invalid place version response: {e}") from e

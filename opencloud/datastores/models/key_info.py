"""Entry metadata decoded from single-entry response headers."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import ResponseDecodeError
from ..runtime.rest.http_client import RestResponse
from ..utils.parsing import iso_to_millis, parse_json

CREATED_TIME_HEADER = "roblox-entry-created-time"
VERSION_HEADER = "roblox-entry-version"
ATTRIBUTES_HEADER = "roblox-entry-attributes"
USER_IDS_HEADER = "roblox-entry-userids"


def _json_header(response: RestResponse, name: str) -> Any:
    raw = response.header(name)
    if raw is None or raw.strip() in ("", "null"):
        return None
    try:
        return parse_json(raw)
    except ValueError as e:
        raise ResponseDecodeError(f"Header '{name}' is not valid JSON") from e


class DataStoreKeyInfo(BaseModel):
    """Version, creation time, user ids and custom metadata of an entry.

    Immutable; the accessors return copies.
    """

    created_time: int
    version: str
    user_ids: tuple[int, ...] = ()
    metadata: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    model_config = ConfigDict(frozen=True)

    @field_validator("metadata", mode="after")
    @classmethod
    def _read_only_metadata(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_serializer("metadata")
    def _dump_metadata(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @classmethod
    def from_response(cls, response: RestResponse) -> DataStoreKeyInfo:
        """Build from the ``roblox-entry-*`` headers of a response.

        Raises:
            ResponseDecodeError: A header is missing or malformed
        """
        created = response.header(CREATED_TIME_HEADER)
        version = response.header(VERSION_HEADER)
        if created is None or version is None:
            raise ResponseDecodeError("Response is missing entry version headers")
        try:
            created_time = iso_to_millis(created)
        except ValueError as e:
            raise ResponseDecodeError(f"Invalid '{CREATED_TIME_HEADER}': {created}") from e

        try:
            return cls(
                created_time=created_time,
                version=version,
                user_ids=_json_header(response, USER_IDS_HEADER) or (),
                metadata=_json_header(response, ATTRIBUTES_HEADER) or {},
            )
        except PydanticValidationError as e:
            raise ResponseDecodeError(f"Invalid entry metadata headers: {e}") from e

    def get_user_ids(self) -> list[int]:
        return list(self.user_ids)

    def get_metadata(self) -> dict[str, str]:
        return dict(self.metadata)

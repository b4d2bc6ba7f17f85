"""Standard data store list item models."""

from pydantic import BaseModel, ConfigDict, Field

from ..utils.parsing import iso_to_millis


class DataStoreInfo(BaseModel):
    """A data store of a universe, as returned by the data store listing."""

    name: str
    created_time: str = Field(..., alias="createdTime")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def created_millis(self) -> int:
        return iso_to_millis(self.created_time)


class EntryKeyInfo(BaseModel):
    """A key of a data store, as returned by the key listing."""

    scope: str
    key: str

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class EntryVersionInfo(BaseModel):
    """Immutable snapshot metadata of one version of an entry.

    ``version`` is opaque; order versions by listing order, never by parsing it.
    """

    version: str
    deleted: bool
    content_length: int = Field(..., alias="contentLength", ge=0)
    created_time: str = Field(..., alias="createdTime")
    object_created_time: str = Field(..., alias="objectCreatedTime")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def created_millis(self) -> int:
        return iso_to_millis(self.created_time)

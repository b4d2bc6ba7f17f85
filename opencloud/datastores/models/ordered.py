"""Ordered data store entry model."""

from pydantic import BaseModel, ConfigDict


class OrderedEntry(BaseModel):
    """A numeric entry of an ordered data store.

    The wire shape is ``{path, id, value}``; ``id`` is the entry key.
    """

    path: str
    id: str
    value: int | float

    model_config = ConfigDict(frozen=True)

    @property
    def key(self) -> str:
        return self.id

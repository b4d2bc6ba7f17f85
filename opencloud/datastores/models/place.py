"""Place management response model."""

from pydantic import BaseModel, ConfigDict, Field


class PlaceVersion(BaseModel):
    """Result of pushing a place file: the latest saved/published version."""

    version_number: int = Field(..., alias="versionNumber")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

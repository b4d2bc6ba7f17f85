"""Place handle: upload place files as saved or published versions."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import MAX_PLACE_FILE_MB
from ..connectors.places.endpoints import REGISTRY
from ..core.enums import VersionType
from ..core.exceptions import ValidationError
from ..models import PlaceVersion
from ..utils.validation import must_be_integer
from .base import ServiceHandle

if TYPE_CHECKING:
    from .universe import Universe

logger = logging.getLogger(__name__)


class Place(ServiceHandle):
    """A place of a universe."""

    registry = REGISTRY

    def __init__(self, universe: Universe, place_id: int) -> None:
        must_be_integer("PlaceId", place_id)
        super().__init__(universe)
        self.id = place_id

    def __repr__(self) -> str:
        return f"Place(id={self.id})"

    async def _push_version(self, path: str | Path, version_type: VersionType) -> int:
        if not isinstance(path, str | Path):
            raise ValidationError("Path must be a string or Path")
        file = Path(path)
        try:
            size = file.stat().st_size
        except OSError as e:
            raise ValidationError(
                "Place file either does not exist, or there is something restricting the access to it"
            ) from e
        if not file.is_file():
            raise ValidationError(f"Place file is not a regular file: {file}")
        if size / (1024 * 1024) >= MAX_PLACE_FILE_MB:
            raise ValidationError(f"Place file cannot be larger than {MAX_PLACE_FILE_MB}MB")

        data = await asyncio.to_thread(file.read_bytes)
        result: PlaceVersion = await self._fetch(
            "push_version",
            self._params(place_id=self.id, version_type=version_type.value, data=data),
        )
        logger.info(
            "Place version pushed",
            extra={"place_id": self.id, "version": result.version_number, "type": version_type.value},
        )
        return result.version_number

    async def save_as(self, path: str | Path) -> int:
        """Upload and save a place file; visible to developers only.

        Returns:
            The latest saved version number
        """
        return await self._push_version(path, VersionType.SAVED)

    async def publish_as(self, path: str | Path) -> int:
        """Upload, save and publish a place file; visible to players.

        Returns:
            The latest published version number
        """
        return await self._push_version(path, VersionType.PUBLISHED)

"""Caller-supplied options for data store handles and writes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DataStoreSetOptions:
    """Custom metadata attached to a write.

    Metadata must be resent on every write, even when unchanged; a write
    without it clears the stored metadata.
    """

    metadata: dict[str, str] = field(default_factory=dict)

    def get_metadata(self) -> dict[str, str]:
        return self.metadata

    def set_metadata(self, metadata: dict[str, str]) -> None:
        self.metadata = metadata


@dataclass(frozen=True)
class DataStoreOptions:
    """Handle-level options; ``all_scopes`` lists keys across every scope."""

    all_scopes: bool = False

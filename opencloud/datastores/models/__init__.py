"""Data models.

Response models are Pydantic v2 and frozen; option holders are dataclasses.
"""

from .datastore import DataStoreInfo, EntryKeyInfo, EntryVersionInfo
from .key_info import DataStoreKeyInfo
from .options import DataStoreOptions, DataStoreSetOptions
from .ordered import OrderedEntry
from .place import PlaceVersion

__all__ = [
    "DataStoreInfo",
    "EntryKeyInfo",
    "EntryVersionInfo",
    "DataStoreKeyInfo",
    "DataStoreOptions",
    "DataStoreSetOptions",
    "OrderedEntry",
    "PlaceVersion",
]

"""Public handles: universe, data stores, places and messaging."""

from .data_store import DataStore, DataStoreDirectory
from .messaging import MessagingService
from .ordered_data_store import OrderedDataStore
from .place import Place
from .universe import Universe

__all__ = [
    "Universe",
    "DataStore",
    "DataStoreDirectory",
    "OrderedDataStore",
    "Place",
    "MessagingService",
]

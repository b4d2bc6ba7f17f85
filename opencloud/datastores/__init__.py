"""OpenCloud Data Stores - async client for hosted data store APIs.

Store, read, increment, enumerate and version JSON values under
(data store, scope, key) coordinates, manage ordered numeric stores, push
place files and publish cross-server messages. Every operation is a
pass-through to the remote service; nothing is cached locally.
"""

from .api import DataStore, DataStoreDirectory, MessagingService, OrderedDataStore, Place, Universe
from .core import (
    DataStoreError,
    EntryNotFoundError,
    ErrorKind,
    RateLimitError,
    RemoteCallError,
    ResponseDecodeError,
    SortDirection,
    TerminalPageError,
    ValidationError,
    VersionType,
)
from .models import (
    DataStoreInfo,
    DataStoreKeyInfo,
    DataStoreOptions,
    DataStoreSetOptions,
    EntryKeyInfo,
    EntryVersionInfo,
    OrderedEntry,
    PlaceVersion,
)
from .runtime import HTTPClient, Pages, RestResponse
from .utils import parse_json

__version__ = "0.1.0"

__all__ = [
    # Handles
    "Universe",
    "DataStore",
    "DataStoreDirectory",
    "OrderedDataStore",
    "Place",
    "MessagingService",
    # Pagination
    "Pages",
    # Models
    "DataStoreInfo",
    "DataStoreKeyInfo",
    "DataStoreOptions",
    "DataStoreSetOptions",
    "EntryKeyInfo",
    "EntryVersionInfo",
    "OrderedEntry",
    "PlaceVersion",
    # Enums
    "ErrorKind",
    "SortDirection",
    "VersionType",
    # Errors
    "DataStoreError",
    "ValidationError",
    "RemoteCallError",
    "EntryNotFoundError",
    "RateLimitError",
    "TerminalPageError",
    "ResponseDecodeError",
    # Transport
    "HTTPClient",
    "RestResponse",
    "parse_json",
]

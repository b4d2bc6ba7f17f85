"""Core components."""

from .enums import ErrorKind, SortDirection, VersionType
from .exceptions import (
    DataStoreError,
    EntryNotFoundError,
    RateLimitError,
    RemoteCallError,
    ResponseDecodeError,
    TerminalPageError,
    ValidationError,
)

__all__ = [
    "ErrorKind",
    "SortDirection",
    "VersionType",
    "DataStoreError",
    "ValidationError",
    "RemoteCallError",
    "EntryNotFoundError",
    "RateLimitError",
    "TerminalPageError",
    "ResponseDecodeError",
]

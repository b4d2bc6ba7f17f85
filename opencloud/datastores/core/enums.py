"""Core enumerations shared by models, endpoints and handles."""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure class of a DataStoreError."""

    VALIDATION = "validation"
    REMOTE = "remote"
    TERMINAL_PAGE = "terminal_page"
    DECODE = "decode"


class SortDirection(str, Enum):
    """Order in which entry versions are listed.

    Ascending lists older versions first, Descending younger first.
    """

    ASCENDING = "Ascending"
    DESCENDING = "Descending"


class VersionType(str, Enum):
    """How an uploaded place file is pushed."""

    SAVED = "Saved"
    PUBLISHED = "Published"

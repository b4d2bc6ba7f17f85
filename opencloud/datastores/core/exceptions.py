"""Custom exception hierarchy.

Every error raised by the library derives from DataStoreError and carries an
ErrorKind so callers can branch on the failure class without inspecting
messages. Validation errors are raised before any I/O and are never
retryable; remote errors expose the HTTP status of the failed call.
"""

from __future__ import annotations

from typing import ClassVar

from .enums import ErrorKind


class DataStoreError(Exception):
    """Base exception for all library errors."""

    kind: ClassVar[ErrorKind]

    @property
    def retryable(self) -> bool:
        return False


class ValidationError(DataStoreError):
    """Malformed input rejected before any network call."""

    kind = ErrorKind.VALIDATION


class RemoteCallError(DataStoreError):
    """Remote service answered with a non-success status."""

    kind = ErrorKind.REMOTE

    def __init__(
        self,
        message: str,
        status_code: int,
        status_text: str = "",
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text

    @property
    def retryable(self) -> bool:
        return self.status_code >= 500 or self.status_code == 429


class EntryNotFoundError(RemoteCallError):
    """Entry does not exist or its latest version is a tombstone."""

    def __init__(self, message: str, status_text: str = "Not Found") -> None:
        super().__init__(message, status_code=404, status_text=status_text)


class RateLimitError(RemoteCallError):
    """Service rate limit exceeded."""

    def __init__(
        self,
        message: str,
        status_text: str = "Too Many Requests",
        retry_after: int = 60,
    ) -> None:
        super().__init__(message, status_code=429, status_text=status_text)
        self.retry_after = retry_after


class TerminalPageError(DataStoreError):
    """Pages were advanced after the last page had been reached."""

    kind = ErrorKind.TERMINAL_PAGE


class ResponseDecodeError(DataStoreError):
    """Response body is not valid JSON or does not match the expected schema."""

    kind = ErrorKind.DECODE

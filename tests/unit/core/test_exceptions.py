"""Unit tests for the exception hierarchy.

Tests focus on error kinds and retryability, not just field access.
"""

from opencloud.datastores.core import (
    DataStoreError,
    EntryNotFoundError,
    ErrorKind,
    RateLimitError,
    RemoteCallError,
    ResponseDecodeError,
    TerminalPageError,
    ValidationError,
)


def test_validation_error_kind():
    error = ValidationError("bad")
    assert error.kind is ErrorKind.VALIDATION
    assert not error.retryable
    assert isinstance(error, DataStoreError)


def test_remote_call_error_carries_status():
    error = RemoteCallError("502: Bad Gateway", status_code=502, status_text="Bad Gateway")
    assert error.status_code == 502
    assert error.status_text == "Bad Gateway"
    assert error.kind is ErrorKind.REMOTE
    assert error.retryable


def test_not_found_is_remote_and_not_retryable():
    error = EntryNotFoundError("404: Not Found")
    assert isinstance(error, RemoteCallError)
    assert error.status_code == 404
    assert not error.retryable


def test_rate_limit_error_with_retry_after():
    error = RateLimitError("rate limit", retry_after=120)
    assert error.status_code == 429
    assert error.retry_after == 120
    assert error.retryable


def test_terminal_and_decode_kinds():
    assert TerminalPageError("done").kind is ErrorKind.TERMINAL_PAGE
    assert ResponseDecodeError("bad body").kind is ErrorKind.DECODE

"""Shared fixtures for unit tests.

The HTTPClient is replaced by a MagicMock whose ``request`` coroutine returns
queued RestResponse objects, so no test touches the network.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from opencloud.datastores import Universe
from opencloud.datastores.runtime.rest import HTTPClient, RestResponse


def make_response(
    status: int = 200,
    body: Any = None,
    *,
    text: str | None = None,
    headers: dict[str, str] | None = None,
    reason: str = "OK",
) -> RestResponse:
    """Build a RestResponse; ``body`` is JSON-encoded unless ``text`` is given."""
    if text is None:
        text = "" if body is None else json.dumps(body)
    return RestResponse(
        status=status,
        reason=reason,
        headers={k.lower(): v for k, v in (headers or {}).items()},
        text=text,
    )


ENTRY_HEADERS = {
    "roblox-entry-created-time": "2022-02-18T22:38:59.9244932Z",
    "roblox-entry-version": "08D9F3233D1E7E38.0000000001.08D9F3233D1E7E38.01",
    "roblox-entry-attributes": '{"owner":"alice"}',
    "roblox-entry-userids": "[1, 2]",
}


@pytest.fixture(name="make_response")
def make_response_fixture():
    return make_response


@pytest.fixture(name="entry_headers")
def entry_headers_fixture():
    return dict(ENTRY_HEADERS)


@pytest.fixture(name="call_args")
def call_args_fixture():
    return call_args


@pytest.fixture
def mock_client():
    """Mock HTTP client; queue responses via ``mock_client.request.side_effect``."""
    client = MagicMock(spec=HTTPClient)
    client.request = AsyncMock(return_value=make_response(200, {}))
    client.close = AsyncMock()
    return client


@pytest.fixture
def universe(mock_client):
    return Universe(1234, "test-key", client=mock_client)


def call_args(mock_client, index: int = -1) -> tuple[str, str, dict[str, Any]]:
    """Return (method, url, kwargs) of a recorded request call."""
    call = mock_client.request.call_args_list[index]
    method, url = call.args
    return method, url, call.kwargs

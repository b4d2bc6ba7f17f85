"""Unit tests for the standard DataStore handle.

Tests focus on the request each operation issues, validation before I/O and
the documented multi-call sequences of increment and remove.
"""

from __future__ import annotations

import base64
import hashlib
import json

import pytest

from opencloud.datastores import (
    DataStoreOptions,
    DataStoreSetOptions,
    EntryNotFoundError,
    RemoteCallError,
    SortDirection,
    ValidationError,
)

BASE = "https://apis.roblox.com/datastores/v1/universes/1234/standard-datastores"
ENTRY_URL = f"{BASE}/datastore/entries/entry"

VERSION_BODY = {
    "version": "v2",
    "deleted": False,
    "contentLength": 11,
    "createdTime": "2022-02-18T22:38:59.9244932Z",
    "objectCreatedTime": "2022-02-18T22:38:59.9244932Z",
}


@pytest.fixture
def store(universe):
    return universe.get_data_store("Inventory", scope="global")


class TestDataStoreGet:
    """Test reading entries."""

    @pytest.mark.asyncio
    async def test_get_returns_value_and_key_info(
        self, store, mock_client, make_response, entry_headers, call_args
    ):
        mock_client.request.return_value = make_response(200, {"gold": 10}, headers=entry_headers)

        value, info = await store.get("player_1")

        assert value == {"gold": 10}
        assert info.get_metadata() == {"owner": "alice"}
        method, url, kwargs = call_args(mock_client)
        assert (method, url) == ("GET", ENTRY_URL)
        assert kwargs["params"] == {
            "datastoreName": "Inventory",
            "scope": "global",
            "entryKey": "player_1",
        }
        assert kwargs["headers"] == {"x-api-key": "test-key"}

    @pytest.mark.asyncio
    async def test_get_value_with_bare_inf(self, store, mock_client, make_response, entry_headers):
        mock_client.request.return_value = make_response(
            200, text='{"best": inf, "label": "inf"}', headers=entry_headers
        )

        value, _ = await store.get("player_1")

        assert value["best"] == float("inf")
        assert value["label"] == "inf"

    @pytest.mark.asyncio
    async def test_get_missing_key_raises_not_found(self, store, mock_client, make_response):
        mock_client.request.return_value = make_response(404, reason="Not Found")

        with pytest.raises(EntryNotFoundError):
            await store.get("nobody")

    @pytest.mark.asyncio
    async def test_get_rejects_non_string_key(self, store, mock_client):
        with pytest.raises(ValidationError):
            await store.get(42)
        mock_client.request.assert_not_called()


class TestDataStoreSet:
    """Test writing entries."""

    @pytest.mark.asyncio
    async def test_set_sends_body_checksum_and_headers(
        self, store, mock_client, make_response, call_args
    ):
        mock_client.request.return_value = make_response(200, VERSION_BODY)

        version = await store.set(
            "player_1", {"gold": 10}, [7, 8], DataStoreSetOptions({"owner": "alice"})
        )

        assert version == "v2"
        method, url, kwargs = call_args(mock_client)
        assert (method, url) == ("POST", ENTRY_URL)
        body = b'{"gold":10}'
        assert kwargs["data"] == body
        headers = kwargs["headers"]
        assert headers["content-md5"] == base64.b64encode(hashlib.md5(body).digest()).decode()
        assert headers["roblox-entry-userids"] == "[7,8]"
        assert json.loads(headers["roblox-entry-attributes"]) == {"owner": "alice"}
        assert headers["x-api-key"] == "test-key"

    @pytest.mark.asyncio
    async def test_set_without_options_omits_attributes(
        self, store, mock_client, make_response, call_args
    ):
        mock_client.request.return_value = make_response(200, VERSION_BODY)

        await store.set("player_1", 5)

        _, _, kwargs = call_args(mock_client)
        assert "roblox-entry-attributes" not in kwargs["headers"]
        assert kwargs["headers"]["roblox-entry-userids"] == "[]"

    @pytest.mark.asyncio
    async def test_set_match_version_query(self, store, mock_client, make_response, call_args):
        mock_client.request.return_value = make_response(200, VERSION_BODY)

        await store.set("player_1", 5, match_version="v1")

        _, _, kwargs = call_args(mock_client)
        assert kwargs["params"]["matchVersion"] == "v1"
        assert kwargs["params"]["exclusiveCreate"] is None

    @pytest.mark.asyncio
    async def test_oversized_value_never_calls_network(self, store, mock_client):
        with pytest.raises(ValidationError):
            await store.set("big", "x" * 4_000_000)
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "length,accepted",
        [
            (3_999_998, False),  # 4,000,000 bytes with quotes
            (3_999_997, True),
        ],
    )
    async def test_size_limit_boundary(
        self, store, mock_client, make_response, call_args, length, accepted
    ):
        mock_client.request.return_value = make_response(200, VERSION_BODY)

        if not accepted:
            with pytest.raises(ValidationError, match="4MB"):
                await store.set("big", "x" * length)
            mock_client.request.assert_not_called()
            return

        await store.set("big", "x" * length)
        mock_client.request.assert_called_once()
        assert len(call_args(mock_client)[2]["data"]) == 3_999_999

    @pytest.mark.asyncio
    async def test_non_ascii_value_sized_as_utf8(
        self, store, mock_client, make_response, call_args
    ):
        mock_client.request.return_value = make_response(200, VERSION_BODY)

        await store.set("k", "\u65e5" * 700_000)

        data = call_args(mock_client)[2]["data"]
        assert len(data) == 2_100_002
        assert json.loads(data.decode("utf-8")) == "\u65e5" * 700_000

    @pytest.mark.asyncio
    async def test_non_ascii_metadata_header_is_escaped(
        self, store, mock_client, make_response, call_args
    ):
        mock_client.request.return_value = make_response(200, VERSION_BODY)

        await store.set("k", "caf\u00e9", options=DataStoreSetOptions({"owner": "\u00e9"}))

        kwargs = call_args(mock_client)[2]
        assert kwargs["headers"]["roblox-entry-attributes"] == '{"owner":"\\u00e9"}'
        assert kwargs["data"] == "\"caf\u00e9\"".encode("utf-8")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "value", [float("inf"), float("-inf"), float("nan"), {"score": float("inf")}]
    )
    async def test_non_finite_value_rejected(self, store, mock_client, value):
        with pytest.raises(ValidationError):
            await store.set("k", value)
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_none_value_rejected(self, store, mock_client):
        with pytest.raises(ValidationError, match="empty"):
            await store.set("player_1", None)
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_match_version_and_exclusive_create_conflict(self, store, mock_client):
        with pytest.raises(ValidationError):
            await store.set("player_1", 1, match_version="v1", exclusive_create=True)
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_unserializable_value_rejected(self, store, mock_client):
        with pytest.raises(ValidationError):
            await store.set("player_1", {1, 2})
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_set_remote_failure(self, store, mock_client, make_response):
        mock_client.request.return_value = make_response(412, reason="Precondition Failed")

        with pytest.raises(RemoteCallError) as exc_info:
            await store.set("player_1", 1, match_version="stale")
        assert exc_info.value.status_code == 412


class TestDataStoreIncrement:
    """Test increment: remote increment followed by a full get."""

    @pytest.mark.asyncio
    async def test_increment_refetches_value(
        self, store, mock_client, make_response, entry_headers, call_args
    ):
        mock_client.request.side_effect = [
            make_response(200, 999, headers=entry_headers),
            make_response(200, 15, headers=entry_headers),
        ]

        value, info = await store.increment("coins", 5, [1])

        assert value == 15
        assert info.version == entry_headers["roblox-entry-version"]
        assert mock_client.request.call_count == 2
        method, url, kwargs = call_args(mock_client, 0)
        assert (method, url) == ("POST", f"{ENTRY_URL}/increment")
        assert kwargs["params"]["incrementBy"] == 5
        assert kwargs["headers"]["roblox-entry-userids"] == "[1]"
        assert call_args(mock_client, 1)[0] == "GET"

    @pytest.mark.asyncio
    async def test_increment_rejects_float_delta(self, store, mock_client):
        with pytest.raises(ValidationError):
            await store.increment("coins", 1.5)
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_failed_increment_skips_get(self, store, mock_client, make_response):
        mock_client.request.return_value = make_response(400, reason="Bad Request")

        with pytest.raises(RemoteCallError):
            await store.increment("coins", 1)
        assert mock_client.request.call_count == 1


class TestDataStoreRemove:
    """Test remove: read previous value, then delete."""

    @pytest.mark.asyncio
    async def test_remove_returns_previous_value(
        self, store, mock_client, make_response, entry_headers, call_args
    ):
        mock_client.request.side_effect = [
            make_response(200, {"gold": 10}, headers=entry_headers),
            make_response(204, reason="No Content"),
        ]

        value, info = await store.remove("player_1")

        assert value == {"gold": 10}
        assert info.get_user_ids() == [1, 2]
        assert [call_args(mock_client, i)[0] for i in range(2)] == ["GET", "DELETE"]

    @pytest.mark.asyncio
    async def test_failed_delete_propagates(self, store, mock_client, make_response, entry_headers):
        mock_client.request.side_effect = [
            make_response(200, 1, headers=entry_headers),
            make_response(500, reason="Internal Server Error"),
        ]

        with pytest.raises(RemoteCallError) as exc_info:
            await store.remove("player_1")
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_remove_missing_key_does_not_delete(self, store, mock_client, make_response):
        mock_client.request.return_value = make_response(404, reason="Not Found")

        with pytest.raises(EntryNotFoundError):
            await store.remove("nobody")
        assert mock_client.request.call_count == 1


class TestDataStoreListing:
    """Test key and version listings."""

    @pytest.mark.asyncio
    async def test_list_keys(self, universe, mock_client, make_response, call_args):
        store = universe.get_data_store("Inventory", options=DataStoreOptions(all_scopes=True))
        mock_client.request.return_value = make_response(
            200, {"keys": [{"scope": "global", "key": "player_1"}], "nextPageCursor": None}
        )

        pages = store.list_keys(prefix="player", page_size=10)
        keys = await pages.get_current_page()

        assert [k.key for k in keys] == ["player_1"]
        method, url, kwargs = call_args(mock_client)
        assert url == f"{BASE}/datastore/entries"
        assert kwargs["params"]["AllScopes"] is True
        assert kwargs["params"]["prefix"] == "player"
        assert kwargs["params"]["limit"] == 10

    @pytest.mark.asyncio
    async def test_list_versions(self, store, mock_client, make_response, call_args):
        mock_client.request.return_value = make_response(
            200, {"versions": [VERSION_BODY], "nextPageCursor": "c1"}
        )

        pages = store.list_versions(
            "player_1", SortDirection.DESCENDING, min_date=1000, page_size=5
        )
        versions = await pages.get_current_page()

        assert versions[0].version == "v2"
        assert not pages.is_finished
        _, url, kwargs = call_args(mock_client)
        assert url == f"{ENTRY_URL}/versions"
        assert kwargs["params"]["sortOrder"] == "Descending"
        assert kwargs["params"]["startTime"] == "1970-01-01T00:00:01.000Z"
        assert kwargs["params"]["endTime"] is None

    def test_list_versions_accepts_string_direction(self, store):
        store.list_versions("player_1", "Ascending")

    def test_list_versions_rejects_unknown_direction(self, store):
        with pytest.raises(ValidationError, match="SortDirection"):
            store.list_versions("player_1", "Sideways")

    @pytest.mark.parametrize("method", ["list_keys", "list_versions"])
    def test_page_size_over_limit_rejected(self, store, mock_client, method):
        with pytest.raises(ValidationError):
            if method == "list_keys":
                store.list_keys(page_size=51)
            else:
                store.list_versions("player_1", page_size=51)
        mock_client.request.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_version(self, store, mock_client, make_response, entry_headers, call_args):
        mock_client.request.return_value = make_response(200, "old", headers=entry_headers)

        value, _ = await store.get_version("player_1", "v1")

        assert value == "old"
        _, url, kwargs = call_args(mock_client)
        assert url == f"{ENTRY_URL}/versions/version"
        assert kwargs["params"]["versionId"] == "v1"

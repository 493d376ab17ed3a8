"""Tests for SpotifyHTTPClient: request execution and 401 refresh/retry."""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from spotiwrap.config import ClientConfig
from spotiwrap.exceptions import (
    SpotifyAPIError,
    SpotifyHTTPError,
    SpotifyTransportError,
)
from spotiwrap.http_client import RequestDescriptor, SpotifyHTTPClient

BASE_URL = "https://api.spotify.com/v1"


@pytest.fixture
def make_http(http_client):
    def _make(access_token="old-token", refresher=None, config=None):
        return SpotifyHTTPClient(
            access_token, refresher=refresher, config=config, client=http_client,
        )
    return _make


def _refresher(result):
    refresher = MagicMock()
    refresher.request = AsyncMock(return_value=result)
    return refresher


# =========================================================================
# Request descriptor
# =========================================================================


class TestRequestDescriptor:
    """Tests for RequestDescriptor normalization."""

    def test_defaults(self):
        request = RequestDescriptor(path=f"{BASE_URL}/me")
        assert request.method == "GET"
        assert request.headers == {"Content-Type": "application/json"}
        assert request.body is None

    def test_method_is_case_insensitive(self):
        request = RequestDescriptor(path=f"{BASE_URL}/me", method="put")
        assert request.method == "PUT"

    def test_unsupported_method_raises(self):
        with pytest.raises(ValueError):
            RequestDescriptor(path=f"{BASE_URL}/me", method="PATCH")

    def test_relative_path_raises(self):
        with pytest.raises(ValueError, match="absolute URL"):
            RequestDescriptor(path="/me")

    def test_empty_path_raises(self):
        with pytest.raises(ValueError):
            RequestDescriptor(path="")

    def test_dict_body_serialized_to_json(self):
        request = RequestDescriptor(path=f"{BASE_URL}/me", body={"a": [1, 2]})
        assert json.loads(request.encoded_body()) == {"a": [1, 2]}

    def test_string_body_passed_through(self):
        request = RequestDescriptor(path=f"{BASE_URL}/me", body="aGVsbG8=")
        assert request.encoded_body() == b"aGVsbG8="

    def test_empty_body_not_sent(self):
        assert RequestDescriptor(path=f"{BASE_URL}/me", body={}).encoded_body() is None
        assert RequestDescriptor(path=f"{BASE_URL}/me", body="").encoded_body() is None


# =========================================================================
# Request executor
# =========================================================================


class TestExecute:
    """Tests for the single-request executor."""

    async def test_sets_bearer_token(self, make_http, fake_api):
        fake_api.queue(httpx.Response(200, json={}))
        http = make_http("test-token")

        await http.execute(RequestDescriptor(path=f"{BASE_URL}/me"))

        assert fake_api.last.headers["Authorization"] == "Bearer test-token"
        assert fake_api.last.headers["Content-Type"] == "application/json"

    async def test_reads_token_at_call_time(self, make_http, fake_api):
        fake_api.queue(httpx.Response(200, json={}))
        http = make_http("first")
        request = RequestDescriptor(path=f"{BASE_URL}/me")
        http.access_token = "second"

        await http.execute(request)

        assert fake_api.last.headers["Authorization"] == "Bearer second"

    async def test_explicit_token_overrides_session(self, make_http, fake_api):
        fake_api.queue(httpx.Response(200, json={}))
        http = make_http("session-token")

        await http.execute(RequestDescriptor(path=f"{BASE_URL}/me"), access_token="local")

        assert fake_api.last.headers["Authorization"] == "Bearer local"

    async def test_header_overrides_replace_defaults(self, make_http, fake_api):
        fake_api.queue(httpx.Response(202))
        http = make_http()

        await http.execute(RequestDescriptor(
            path=f"{BASE_URL}/playlists/p1/images",
            method="PUT",
            body="/9j/4AAQSkZJRg==",
            headers={"Content-Type": "image/jpeg"},
        ))

        assert fake_api.last.headers["Content-Type"] == "image/jpeg"
        assert fake_api.last.content == b"/9j/4AAQSkZJRg=="

    async def test_returns_raw_response(self, make_http, fake_api):
        fake_api.queue(httpx.Response(500, content=b"oops"))
        http = make_http()

        response = await http.execute(RequestDescriptor(path=f"{BASE_URL}/me"))

        assert response.status_code == 500
        assert response.content == b"oops"

    async def test_transport_error_raised_as_transport_failure(self, make_http, fake_api):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        fake_api.queue(refuse)
        http = make_http()

        with pytest.raises(SpotifyTransportError) as exc_info:
            await http.execute(RequestDescriptor(path=f"{BASE_URL}/me"))

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
        assert len(fake_api.requests) == 1


# =========================================================================
# Successful requests
# =========================================================================


class TestSuccessfulRequests:
    """Tests for successful HTTP requests."""

    async def test_get_artist(self, make_http, fake_api):
        fake_api.queue(httpx.Response(200, json={"id": "abc123", "name": "Test Artist"}))
        http = make_http()

        result = await http.request(f"{BASE_URL}/artists/abc123")

        assert result == {"id": "abc123", "name": "Test Artist"}
        assert fake_api.last.method == "GET"
        assert str(fake_api.last.url) == f"{BASE_URL}/artists/abc123"

    async def test_204_returns_status_marker(self, make_http, fake_api):
        fake_api.queue(httpx.Response(204))
        http = make_http()

        result = await http.request(
            f"{BASE_URL}/me/following?ids=abc&type=artist", method="PUT",
        )

        assert result == {"status": 204}
        assert fake_api.last.method == "PUT"
        assert fake_api.last.url.params["ids"] == "abc"

    async def test_params_drop_none_and_render_booleans(self, make_http, fake_api):
        fake_api.queue(httpx.Response(204))
        http = make_http()

        await http.request(
            f"{BASE_URL}/me/player/shuffle",
            method="PUT",
            params={"state": True, "device_id": None},
        )

        assert dict(fake_api.last.url.params) == {"state": "true"}

    async def test_json_body_round_trip(self, make_http, fake_api):
        def echo(request):
            return httpx.Response(200, content=request.content)

        fake_api.queue(echo)
        http = make_http()
        body = {"uris": ["spotify:track:1", "spotify:track:2"], "position": 0, "nested": {"ok": True}}

        result = await http.request(f"{BASE_URL}/playlists/p1/tracks", method="POST", body=body)

        assert result == body

    async def test_same_get_twice_is_independent(self, make_http, fake_api):
        fake_api.queue(
            httpx.Response(200, json={"id": "abc123"}),
            httpx.Response(200, json={"id": "abc123"}),
        )
        http = make_http("valid")

        first = await http.request(f"{BASE_URL}/artists/abc123")
        second = await http.request(f"{BASE_URL}/artists/abc123")

        assert first == second == {"id": "abc123"}
        assert len(fake_api.requests) == 2
        assert http.access_token == "valid"


# =========================================================================
# Error classification through the pipeline
# =========================================================================


class TestErrorHandling:
    """Tests for HTTP error responses."""

    async def test_500_with_malformed_json(self, make_http, fake_api):
        fake_api.queue(httpx.Response(500, content=b"{not json"))
        http = make_http()

        with pytest.raises(SpotifyHTTPError) as exc_info:
            await http.request(f"{BASE_URL}/me")

        assert exc_info.value.status_code == 500
        assert exc_info.value.reason == "Internal Server Error"

    async def test_404_with_error_payload(self, make_http, fake_api):
        fake_api.queue(httpx.Response(
            404, json={"error": {"status": 404, "message": "Non existing id"}},
        ))
        http = make_http()

        with pytest.raises(SpotifyAPIError, match="Non existing id") as exc_info:
            await http.request(f"{BASE_URL}/albums/nope")

        assert exc_info.value.status_code == 404
        assert exc_info.value.payload == {"status": 404, "message": "Non existing id"}

    async def test_error_payload_in_200_is_api_failure(self, make_http, fake_api):
        fake_api.queue(httpx.Response(
            200, json={"error": {"status": 400, "message": "Invalid market"}},
        ))
        http = make_http()

        with pytest.raises(SpotifyAPIError, match="Invalid market"):
            await http.request(f"{BASE_URL}/browse/new-releases")


# =========================================================================
# Token refresh
# =========================================================================


class TestTokenRefresh:
    """Tests for the 401 refresh-and-retry path."""

    async def test_401_without_refresher_fails_after_one_call(self, make_http, fake_api):
        fake_api.queue(httpx.Response(401))
        http = make_http()

        with pytest.raises(SpotifyHTTPError) as exc_info:
            await http.request(f"{BASE_URL}/me")

        assert exc_info.value.status_code == 401
        assert len(fake_api.requests) == 1

    async def test_401_with_refresher_retries_with_new_token(self, make_http, fake_api):
        fake_api.queue(
            httpx.Response(401, json={"error": {"status": 401, "message": "The access token expired"}}),
            httpx.Response(200, json={"id": "abc123"}),
        )
        refresher = _refresher({"access_token": "new"})
        http = make_http("expired", refresher=refresher)

        result = await http.request(f"{BASE_URL}/artists/abc123")

        assert result == {"id": "abc123"}
        assert len(fake_api.requests) == 2
        assert fake_api.requests[0].headers["Authorization"] == "Bearer expired"
        assert fake_api.requests[1].headers["Authorization"] == "Bearer new"
        assert http.access_token == "new"
        refresher.request.assert_awaited_once()

    async def test_retry_reissues_same_request(self, make_http, fake_api):
        fake_api.queue(httpx.Response(401), httpx.Response(201, json={"snapshot_id": "s2"}))
        http = make_http(refresher=_refresher({"access_token": "new"}))

        await http.request(
            f"{BASE_URL}/playlists/p1/tracks", method="POST", body={"uris": ["spotify:track:1"]},
        )

        first, second = fake_api.requests
        assert (first.method, first.url, first.content) == (second.method, second.url, second.content)

    async def test_second_401_is_not_refreshed_again(self, make_http, fake_api):
        fake_api.queue(httpx.Response(401), httpx.Response(401))
        refresher = _refresher({"access_token": "new"})
        http = make_http(refresher=refresher)

        with pytest.raises(SpotifyHTTPError) as exc_info:
            await http.request(f"{BASE_URL}/me")

        assert exc_info.value.status_code == 401
        assert len(fake_api.requests) == 2
        refresher.request.assert_awaited_once()

    async def test_retry_result_classified_as_is(self, make_http, fake_api):
        fake_api.queue(
            httpx.Response(401),
            httpx.Response(403, json={"error": {"status": 403, "message": "Premium required"}}),
        )
        http = make_http(refresher=_refresher({"access_token": "new"}))

        with pytest.raises(SpotifyAPIError, match="Premium required"):
            await http.request(f"{BASE_URL}/me/player/pause", method="PUT")

    async def test_refresher_raising_classifies_original_response(self, make_http, fake_api):
        fake_api.queue(httpx.Response(
            401, json={"error": {"status": 401, "message": "The access token expired"}},
        ))
        refresher = MagicMock()
        refresher.request = AsyncMock(side_effect=RuntimeError("refresh broke"))
        http = make_http("expired", refresher=refresher)

        with pytest.raises(SpotifyAPIError, match="The access token expired"):
            await http.request(f"{BASE_URL}/me")

        refresher.request.assert_awaited_once()
        assert len(fake_api.requests) == 1
        assert http.access_token == "expired"

    async def test_refresher_without_token_classifies_original_response(self, make_http, fake_api):
        fake_api.queue(httpx.Response(401))
        refresher = _refresher({"error": "invalid_grant"})
        http = make_http("expired", refresher=refresher)

        with pytest.raises(SpotifyHTTPError):
            await http.request(f"{BASE_URL}/me")

        refresher.request.assert_awaited_once()
        assert len(fake_api.requests) == 1
        assert http.access_token == "expired"

    async def test_sync_refresher_is_supported(self, make_http, fake_api):
        fake_api.queue(httpx.Response(401), httpx.Response(200, json={"id": "me"}))
        refresher = MagicMock()
        refresher.request.return_value = {"access_token": "sync-token"}
        http = make_http(refresher=refresher)

        assert await http.request(f"{BASE_URL}/me") == {"id": "me"}
        assert http.access_token == "sync-token"

    async def test_refresh_disabled_by_config(self, make_http, fake_api):
        fake_api.queue(httpx.Response(401))
        refresher = _refresher({"access_token": "new"})
        http = make_http(
            refresher=refresher, config=ClientConfig(refresh_on_unauthorized=False),
        )

        with pytest.raises(SpotifyHTTPError):
            await http.request(f"{BASE_URL}/me")

        refresher.request.assert_not_called()

    async def test_non_401_does_not_refresh(self, make_http, fake_api):
        fake_api.queue(httpx.Response(403))
        refresher = _refresher({"access_token": "new"})
        http = make_http(refresher=refresher)

        with pytest.raises(SpotifyHTTPError):
            await http.request(f"{BASE_URL}/me")

        refresher.request.assert_not_called()

    async def test_retry_uses_token_from_its_own_refresh(self, make_http, fake_api):
        """A concurrent token change must not leak into an in-flight retry."""
        http = make_http("expired")

        async def refresh():
            # Another call replaces the session token while this refresh runs
            http.access_token = "concurrent"
            await asyncio.sleep(0)
            return {"access_token": "mine"}

        refresher = MagicMock()
        refresher.request = refresh
        http.refresher = refresher
        fake_api.queue(httpx.Response(401), httpx.Response(200, json={}))

        await http.request(f"{BASE_URL}/me")

        assert fake_api.requests[1].headers["Authorization"] == "Bearer mine"


# =========================================================================
# Lifecycle
# =========================================================================


class TestLifecycle:
    """Tests for client ownership and closing."""

    async def test_external_client_not_closed(self, make_http, http_client):
        http = make_http()
        await http.aclose()
        assert not http_client.is_closed

    async def test_owned_client_closed(self):
        http = SpotifyHTTPClient("token")
        await http.aclose()
        assert http._client.is_closed

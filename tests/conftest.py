"""
Pytest configuration and shared fixtures for spotiwrap tests.

Network access is replaced by httpx.MockTransport: each test queues the
responses the fake Spotify API should give and inspects the requests it
received afterwards.
"""

import time
from typing import Callable, List, Union

import httpx
import pytest

from spotiwrap import ClientConfig, Spotify

BASE_URL = "https://api.spotify.com/v1"

Reply = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeSpotifyAPI:
    """Replays queued responses in order and records every request."""

    def __init__(self):
        self.replies: List[Reply] = []
        self.requests: List[httpx.Request] = []

    def queue(self, *replies: Reply) -> "FakeSpotifyAPI":
        self.replies.extend(replies)
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.replies:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        reply = self.replies.pop(0)
        if callable(reply):
            return reply(request)
        return reply

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


# =============================================================================
# Transport Fixtures
# =============================================================================

@pytest.fixture
def fake_api():
    """A fake Spotify API with no queued responses."""
    return FakeSpotifyAPI()


@pytest.fixture
async def http_client(fake_api):
    """An httpx.AsyncClient wired to the fake API."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_api)) as client:
        yield client


@pytest.fixture
def make_spotify(http_client):
    """Factory for Spotify clients talking to the fake API."""

    def _make(access_token="test_access_token", refresher=None, config=None):
        return Spotify(
            access_token,
            refresher=refresher,
            config=config or ClientConfig(),
            http_client=http_client,
        )

    return _make


@pytest.fixture
def spotify(make_spotify):
    """A Spotify client without a refresher."""
    return make_spotify()


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def sample_token():
    """A token endpoint response."""
    return {
        'access_token': 'fresh_access_token',
        'token_type': 'Bearer',
        'expires_in': 3600,
        'expires_at': time.time() + 3600,
        'refresh_token': 'test_refresh_token_67890',
        'scope': 'user-library-read user-modify-playback-state',
    }


@pytest.fixture
def sample_artist():
    return {
        'id': 'abc123',
        'name': 'Test Artist',
        'uri': 'spotify:artist:abc123',
        'genres': ['indie'],
        'popularity': 61,
        'followers': {'total': 1200},
        'images': [],
    }


@pytest.fixture
def sample_album(sample_artist):
    return {
        'id': 'album1',
        'name': 'Test Album',
        'uri': 'spotify:album:album1',
        'album_type': 'album',
        'release_date': '2020-01-01',
        'total_tracks': 2,
        'artists': [sample_artist],
        'images': [{'url': 'https://i.scdn.co/image/a.jpg'}],
        'tracks': {
            'items': [
                {'id': 't1', 'name': 'One', 'uri': 'spotify:track:t1', 'artists': [sample_artist]},
                {'id': 't2', 'name': 'Two', 'uri': 'spotify:track:t2', 'artists': [sample_artist]},
            ],
            'total': 2,
        },
    }


@pytest.fixture
def sample_track(sample_artist):
    return {
        'id': 'track1',
        'name': 'Test Track',
        'uri': 'spotify:track:track1',
        'duration_ms': 200000,
        'explicit': False,
        'popularity': 50,
        'track_number': 1,
        'artists': [sample_artist],
        'album': {
            'id': 'album1',
            'name': 'Test Album',
            'uri': 'spotify:album:album1',
            'artists': [sample_artist],
        },
    }


@pytest.fixture
def sample_playlist(sample_track):
    return {
        'id': 'playlist1',
        'name': 'Test Playlist',
        'uri': 'spotify:playlist:playlist1',
        'description': 'A test playlist',
        'public': True,
        'collaborative': False,
        'snapshot_id': 'snap1',
        'owner': {'id': 'user123', 'display_name': 'Test User'},
        'tracks': {
            'items': [
                {'added_at': '2024-01-01T00:00:00Z', 'track': sample_track},
                {'added_at': '2024-01-02T00:00:00Z', 'track': None},
            ],
            'total': 2,
        },
    }


@pytest.fixture
def sample_user():
    return {
        'id': 'user123',
        'display_name': 'Test User',
        'uri': 'spotify:user:user123',
        'country': 'US',
        'product': 'premium',
        'followers': {'total': 3},
        'images': [{'url': 'https://example.com/avatar.jpg'}],
    }

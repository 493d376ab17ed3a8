"""
Asynchronous client for the Spotify Web API.

Architecture:
    - config.py: ClientConfig, the validated session settings
    - http_client.py: SpotifyHTTPClient, token injection and 401 refresh/retry
    - error_handling.py: response classification
    - auth.py: TokenRefresher contract and SpotifyTokenRefresher
    - credentials.py: SpotifyCredentials for the refresher
    - managers/: one manager per resource family
    - models/: typed records with shortcut methods
    - client.py: Spotify facade (session + managers)
    - exceptions.py: Exception hierarchy

Usage:
    from spotiwrap import Spotify, SpotifyCredentials, SpotifyTokenRefresher

    refresher = SpotifyTokenRefresher(SpotifyCredentials.from_env())
    async with Spotify(access_token, refresher=refresher) as spotify:
        artist = await spotify.artists.get("0OdUWJ0sBjDrqHygGUXeCF")
        for track in await artist.top_tracks("US"):
            print(track.name)
"""

import logging

from .auth import SpotifyTokenRefresher, TokenInfo, TokenRefresher
from .client import Spotify
from .config import ClientConfig
from .credentials import SpotifyCredentials
from .enums import AlbumGroup, RepeatState, SearchType, TimeRange, TopItemType
from .exceptions import (
    SpotifyAPIError,
    SpotifyAuthError,
    SpotifyError,
    SpotifyHTTPError,
    SpotifyTokenError,
    SpotifyTransportError,
)
from .http_client import RequestDescriptor, SpotifyHTTPClient
from .models import Album, Artist, Episode, Playlist, Show, Track, User

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Client
    'Spotify',
    'ClientConfig',
    'SpotifyHTTPClient',
    'RequestDescriptor',

    # Auth
    'TokenRefresher',
    'SpotifyTokenRefresher',
    'SpotifyCredentials',
    'TokenInfo',

    # Models
    'Album',
    'Artist',
    'Episode',
    'Playlist',
    'Show',
    'Track',
    'User',

    # Enums
    'AlbumGroup',
    'RepeatState',
    'SearchType',
    'TimeRange',
    'TopItemType',

    # Exceptions
    'SpotifyError',
    'SpotifyTransportError',
    'SpotifyHTTPError',
    'SpotifyAPIError',
    'SpotifyAuthError',
    'SpotifyTokenError',
]

"""
Spotify client facade.

Owns the HTTP session and one manager per resource family. Only the
attributes declared in ``__slots__`` can be assigned, so a typo such as
``spotify.acess_token = ...`` raises instead of silently doing nothing.
"""

import logging
from typing import Any, Mapping, Optional, TYPE_CHECKING

import httpx

from .config import ClientConfig
from .enums import HTTPMethod
from .http_client import SpotifyHTTPClient
from .managers import (
    AlbumManager,
    ArtistManager,
    AudioManager,
    CategoryManager,
    EpisodeManager,
    PlayerManager,
    PlaylistManager,
    ShowManager,
    TrackManager,
    UserManager,
)

if TYPE_CHECKING:
    from .auth import TokenRefresher

logger = logging.getLogger(__name__)


class Spotify:
    """
    Entry point for the Spotify Web API.

    Example:
        async with Spotify(access_token, refresher=refresher) as spotify:
            album = await spotify.albums.get("4aawyAB9vmqN3uQ7FjRGTy")
            await album.play()
    """

    __slots__ = (
        "_http",
        "albums",
        "artists",
        "audio",
        "categories",
        "episodes",
        "player",
        "playlists",
        "shows",
        "tracks",
        "users",
    )

    def __init__(
        self,
        access_token: str,
        refresher: Optional["TokenRefresher"] = None,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            access_token: Bearer token for API requests.
            refresher: Optional token-refresh collaborator, consulted once
                when a request is answered with 401.
            config: Client settings. Defaults to ``ClientConfig()``.
            http_client: Optional httpx.AsyncClient owned by the caller.
        """
        if not access_token:
            raise ValueError("access_token is required")

        self._http = SpotifyHTTPClient(
            access_token, refresher=refresher, config=config, client=http_client,
        )
        base_url = self._http.config.base_url

        self.audio = AudioManager(self, base_url)
        self.albums = AlbumManager(self, base_url)
        self.artists = ArtistManager(self, base_url)
        self.categories = CategoryManager(self, base_url)
        self.episodes = EpisodeManager(self, base_url)
        self.player = PlayerManager(self, base_url)
        self.playlists = PlaylistManager(self, base_url)
        self.shows = ShowManager(self, base_url)
        self.tracks = TrackManager(self, base_url, audio=self.audio)
        self.users = UserManager(self, base_url)
        logger.debug("Spotify client initialized for %s", base_url)

    @property
    def access_token(self) -> str:
        """The current bearer token (replaced after a refresh)."""
        return self._http.access_token

    @access_token.setter
    def access_token(self, value: str) -> None:
        if not value:
            raise ValueError("access_token cannot be empty")
        self._http.access_token = value

    @property
    def refresher(self) -> Optional["TokenRefresher"]:
        return self._http.refresher

    @refresher.setter
    def refresher(self, value: Optional["TokenRefresher"]) -> None:
        self._http.refresher = value

    @property
    def config(self) -> ClientConfig:
        return self._http.config

    @property
    def http(self) -> SpotifyHTTPClient:
        return self._http

    async def request(
        self,
        path: str,
        method: str = HTTPMethod.GET,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send a request to an absolute API URL. See SpotifyHTTPClient.request."""
        return await self._http.request(
            path, method=method, body=body, headers=headers, params=params,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "Spotify":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

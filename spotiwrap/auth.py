"""
Spotify token refresh.

Defines the contract the HTTP client relies on when a request comes back
401, and a stock implementation of it using the refresh_token grant.
Acquiring the first token (the authorization-code flow) is left to the
application.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Dict, Optional, Protocol, Union, runtime_checkable

import httpx

from .credentials import SpotifyCredentials
from .exceptions import SpotifyTokenError

logger = logging.getLogger(__name__)

TOKEN_URL = "https://accounts.spotify.com/api/token"


@runtime_checkable
class TokenRefresher(Protocol):
    """Anything that can hand out a fresh ``{"access_token": ...}`` mapping."""

    def request(self) -> Union[Dict[str, Any], Awaitable[Dict[str, Any]]]:
        ...


@dataclass
class TokenInfo:
    """
    Structured container for OAuth token information.

    Provides type-safe access to token data with validation
    and expiration checking.
    """

    access_token: str
    token_type: str
    expires_at: float
    refresh_token: Optional[str] = None
    scope: Optional[str] = None
    expires_in: Optional[int] = None

    # Token endpoint payload as received
    _raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TokenInfo":
        """
        Create TokenInfo from a token endpoint response.

        Raises:
            SpotifyTokenError: If required fields are missing.
        """
        if not isinstance(data, dict):
            raise SpotifyTokenError(
                f"Token data must be a dictionary, got {type(data)}"
            )

        missing = [k for k in ("access_token", "token_type") if k not in data]
        if missing:
            raise SpotifyTokenError(f"Token missing required fields: {missing}")

        expires_at = data.get("expires_at")
        if expires_at is None:
            expires_at = time.time() + data.get("expires_in", 3600)

        return cls(
            access_token=data["access_token"],
            token_type=data["token_type"],
            expires_at=expires_at,
            refresh_token=data.get("refresh_token"),
            scope=data.get("scope"),
            expires_in=data.get("expires_in"),
            _raw=data.copy(),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage/transmission."""
        result = {
            "access_token": self.access_token,
            "token_type": self.token_type,
            "expires_at": self.expires_at,
        }
        if self.refresh_token:
            result["refresh_token"] = self.refresh_token
        if self.scope:
            result["scope"] = self.scope
        if self.expires_in:
            result["expires_in"] = self.expires_in
        return result

    @property
    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return self.expires_at < time.time()


class SpotifyTokenRefresher:
    """
    Refresh collaborator backed by the Spotify accounts service.

    Exchanges the stored refresh token for a new access token. Spotify may
    rotate the refresh token; the newest one is kept for the next call.

    Example:
        credentials = SpotifyCredentials.from_env()
        spotify = Spotify(access_token, refresher=SpotifyTokenRefresher(credentials))
    """

    def __init__(
        self,
        credentials: SpotifyCredentials,
        client: Optional[httpx.AsyncClient] = None,
        token_url: str = TOKEN_URL,
        timeout: float = 30.0,
    ):
        self._credentials = credentials
        self._refresh_token = credentials.refresh_token
        self._client = client
        self._token_url = token_url
        self._timeout = timeout
        self._token_info: Optional[TokenInfo] = None

    @property
    def token_info(self) -> Optional[TokenInfo]:
        """The token obtained by the most recent successful refresh."""
        return self._token_info

    @property
    def refresh_token(self) -> str:
        return self._refresh_token

    async def request(self) -> Dict[str, Any]:
        """
        Perform the refresh_token grant.

        Returns:
            The token endpoint response, always including ``refresh_token``.

        Raises:
            SpotifyTokenError: If the refresh is rejected or cannot be sent.
        """
        data = {
            "grant_type": "refresh_token",
            "refresh_token": self._refresh_token,
        }
        auth = (self._credentials.client_id, self._credentials.client_secret)

        try:
            if self._client is not None:
                response = await self._client.post(
                    self._token_url, data=data, auth=auth, timeout=self._timeout,
                )
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(self._token_url, data=data, auth=auth)
        except httpx.HTTPError as e:
            logger.error("Token refresh request failed: %s", e)
            raise SpotifyTokenError(f"Token refresh failed: {e}") from e

        if response.status_code != 200:
            try:
                error_msg = response.json().get("error_description", response.text)
            except ValueError:
                error_msg = response.text
            raise SpotifyTokenError(f"Token refresh failed: {error_msg}")

        new_token_data = response.json()
        if not new_token_data:
            raise SpotifyTokenError("No token returned from refresh")

        # Spotify may not return a new refresh_token.
        # Preserve the original so we can refresh again later.
        new_token_data.setdefault("refresh_token", self._refresh_token)
        self._token_info = TokenInfo.from_dict(new_token_data)
        self._refresh_token = self._token_info.refresh_token
        logger.info("Successfully refreshed token")
        return new_token_data

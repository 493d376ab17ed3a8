"""
Spotify credentials management.

Provides an immutable dataclass holding what the token refresher needs,
so it can be injected instead of read from globals.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class SpotifyCredentials:
    """
    Immutable container for Spotify refresh credentials.

    Attributes:
        client_id: The Spotify application client ID.
        client_secret: The Spotify application client secret.
        refresh_token: Long-lived refresh token issued to the user.

    Example:
        credentials = SpotifyCredentials(
            client_id='your_client_id',
            client_secret='your_client_secret',
            refresh_token='your_refresh_token',
        )
    """

    client_id: str
    client_secret: str
    refresh_token: str

    def __post_init__(self):
        """Validate credentials on creation."""
        if not self.client_id:
            raise ValueError("client_id is required")
        if not self.client_secret:
            raise ValueError("client_secret is required")
        if not self.refresh_token:
            raise ValueError("refresh_token is required")

    @classmethod
    def from_env(cls) -> 'SpotifyCredentials':
        """
        Create credentials from environment variables (and a ``.env`` file).

        Raises:
            ValueError: If required environment variables are missing.
        """
        load_dotenv()
        return cls(
            client_id=os.getenv('SPOTIFY_CLIENT_ID', ''),
            client_secret=os.getenv('SPOTIFY_CLIENT_SECRET', ''),
            refresh_token=os.getenv('SPOTIFY_REFRESH_TOKEN', ''),
        )

    def to_dict(self) -> dict:
        return {
            'client_id': self.client_id,
            'client_secret': self.client_secret,
            'refresh_token': self.refresh_token,
        }

    def __repr__(self) -> str:
        return f"SpotifyCredentials(client_id={self.client_id!r}, client_secret='***', refresh_token='***')"

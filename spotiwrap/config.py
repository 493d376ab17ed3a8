"""
Client configuration.

A single validated settings object shared by the HTTP client and every
resource manager, so the API host is defined in exactly one place.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://api.spotify.com/v1"
DEFAULT_TIMEOUT = 30.0

_TRUTHY = {"1", "true", "yes", "on"}


class ClientConfig(BaseModel):
    """
    Settings for a Spotify client session.

    Attributes:
        base_url: API host plus version prefix, without a trailing slash.
        timeout: Per-request timeout in seconds, enforced by httpx.
        refresh_on_unauthorized: Whether a 401 response triggers one token
            refresh and retry when a refresher is configured.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    refresh_on_unauthorized: bool = True

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL and strip trailing slashes."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must be an absolute http(s) URL")
        return v.rstrip("/")

    def url(self, path: str) -> str:
        """Join an API path such as ``/albums/123`` onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create a config from environment variables (and a ``.env`` file).

        Reads ``SPOTIFY_API_BASE_URL``, ``SPOTIFY_HTTP_TIMEOUT`` and
        ``SPOTIFY_REFRESH_ON_UNAUTHORIZED``; unset variables keep defaults.

        Raises:
            pydantic.ValidationError: If a variable holds an invalid value.
        """
        load_dotenv()
        values = {}
        base_url = os.getenv("SPOTIFY_API_BASE_URL")
        if base_url:
            values["base_url"] = base_url
        timeout = os.getenv("SPOTIFY_HTTP_TIMEOUT")
        if timeout:
            values["timeout"] = timeout
        refresh = os.getenv("SPOTIFY_REFRESH_ON_UNAUTHORIZED")
        if refresh:
            values["refresh_on_unauthorized"] = refresh.strip().lower() in _TRUTHY
        return cls(**values)

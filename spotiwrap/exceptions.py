"""
Spotiwrap exceptions.

Provides a clean exception hierarchy for Spotify Web API operations.
Every failed call raises exactly one of the classified errors below.
"""

from typing import Any, Dict, Optional


class SpotifyError(Exception):
    """Base exception for all Spotify-related errors."""
    pass


class SpotifyTransportError(SpotifyError):
    """Raised when the request never produced an HTTP response."""
    pass


class SpotifyHTTPError(SpotifyError):
    """Raised for a non-2xx response without an interpretable error body."""

    def __init__(self, status_code: int, reason: str = ""):
        super().__init__(f"HTTP Error Response: {status_code} {reason}".rstrip())
        self.status_code = status_code
        self.reason = reason


class SpotifyAPIError(SpotifyError):
    """Raised when Spotify returned a structured error payload."""

    def __init__(
        self,
        status_code: int,
        message: str,
        payload: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(f"API Error: status {status_code} - {message}")
        self.status_code = status_code
        self.message = message
        self.payload = payload or {"status": status_code, "message": message}


class SpotifyAuthError(SpotifyError):
    """Raised when authentication/authorization fails."""
    pass


class SpotifyTokenError(SpotifyAuthError):
    """Raised when token operations fail."""
    pass

"""
Spotify URL and URI parser utility.

Extracts resource types and IDs from Spotify URIs and open.spotify.com
URLs, and normalizes id lists for query strings.
"""

import re
import logging
from typing import Iterable, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

_RESOURCE_TYPES = "album|artist|track|playlist|show|episode|user"

_URL_PATTERNS = [
    # https://open.spotify.com/album/4aawyAB9vmqN3uQ7FjRGTy?si=abc123
    # open.spotify.com/intl-de/track/11dFghVXANMlKmJXsNCbNl
    re.compile(
        r"^(?:https?://)?open\.spotify\.com/(?:intl-[a-z]{2}/)?"
        rf"({_RESOURCE_TYPES})/([a-zA-Z0-9]+)/?(?:\?.*)?$"
    ),
    # spotify:album:4aawyAB9vmqN3uQ7FjRGTy
    re.compile(rf"^spotify:({_RESOURCE_TYPES}):([a-zA-Z0-9]+)$"),
]

# URI types that the player can start as a context
CONTEXT_TYPES = frozenset({"album", "artist", "playlist", "show"})


class SpotifyURI(NamedTuple):
    """A parsed ``spotify:type:id`` reference."""

    type: str
    id: str

    @property
    def uri(self) -> str:
        return f"spotify:{self.type}:{self.id}"

    @property
    def is_context(self) -> bool:
        return self.type in CONTEXT_TYPES


def parse_spotify_uri(value: str) -> Optional[SpotifyURI]:
    """
    Parse a Spotify URI or open.spotify.com URL.

    Supports these formats:
        - spotify:track:11dFghVXANMlKmJXsNCbNl
        - https://open.spotify.com/track/11dFghVXANMlKmJXsNCbNl?si=abc
        - open.spotify.com/playlist/37i9dQZF1DXcBWIGoYBM5M

    Args:
        value: The URI or URL to parse.

    Returns:
        SpotifyURI with the resource type and ID, or None if the input
        does not match any known format.
    """
    if not value or not isinstance(value, str):
        return None

    cleaned = value.strip()
    for pattern in _URL_PATTERNS:
        match = pattern.match(cleaned)
        if match:
            return SpotifyURI(type=match.group(1), id=match.group(2))

    logger.debug("Could not parse Spotify URI from: %r", cleaned)
    return None


def to_spotify_id(value: str) -> str:
    """
    Reduce a URI, URL or bare ID to the bare ID.

    Raises:
        ValueError: If the value is empty.
    """
    if not value or not value.strip():
        raise ValueError("Spotify ID cannot be empty")
    parsed = parse_spotify_uri(value)
    return parsed.id if parsed else value.strip()


def join_ids(ids: Union[str, Iterable[str]]) -> str:
    """Normalize one or more IDs/URIs into a comma-joined ID list."""
    if isinstance(ids, str):
        ids = [ids]
    joined = ",".join(to_spotify_id(i) for i in ids)
    if not joined:
        raise ValueError("At least one Spotify ID is required")
    return joined

"""
Enums for request parameters accepted by the Spotify Web API.

Single source of truth for string constants used by the managers.
"""

from enum import StrEnum


class HTTPMethod(StrEnum):
    """HTTP methods the request executor issues."""
    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class RepeatState(StrEnum):
    """Repeat modes for the active playback device."""
    TRACK = "track"
    CONTEXT = "context"
    OFF = "off"


class TimeRange(StrEnum):
    """Affinity windows for a user's top items."""
    SHORT = "short_term"
    MEDIUM = "medium_term"
    LONG = "long_term"


class TopItemType(StrEnum):
    """Entity types returned by the top items endpoint."""
    ARTISTS = "artists"
    TRACKS = "tracks"


class AlbumGroup(StrEnum):
    """Album groups used to filter an artist's albums."""
    ALBUM = "album"
    SINGLE = "single"
    APPEARS_ON = "appears_on"
    COMPILATION = "compilation"


class SearchType(StrEnum):
    """Item types for the search endpoint."""
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"

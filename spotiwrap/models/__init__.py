"""
Typed records for Spotify API objects.

Each model keeps the fields callers use most, the full payload in ``raw``,
and a reference to the owning client so shortcuts like ``album.play()``
can call back into the managers.
"""

from .album import Album
from .artist import Artist
from .episode import Episode
from .playlist import Playlist, PlaylistItem, playlist_item_from_dict
from .show import Show
from .track import Track
from .user import User

__all__ = [
    'Album',
    'Artist',
    'Episode',
    'Playlist',
    'PlaylistItem',
    'Show',
    'Track',
    'User',
    'playlist_item_from_dict',
]

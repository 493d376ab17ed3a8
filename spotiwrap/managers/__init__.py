"""
Resource managers.

One manager per resource family; each exposes endpoint-shaped coroutines
and returns models that can call back into it.
"""

from .albums import AlbumManager
from .artists import ArtistManager
from .audio import AudioManager
from .base import BaseManager
from .categories import CategoryManager
from .episodes import EpisodeManager
from .player import PlayerManager
from .playlists import PlaylistManager
from .shows import ShowManager
from .tracks import TrackManager
from .users import UserManager

__all__ = [
    'AlbumManager',
    'ArtistManager',
    'AudioManager',
    'BaseManager',
    'CategoryManager',
    'EpisodeManager',
    'PlayerManager',
    'PlaylistManager',
    'ShowManager',
    'TrackManager',
    'UserManager',
]

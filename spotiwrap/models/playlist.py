from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

from .episode import Episode
from .track import Track
from .user import User
from .utils import page_items

if TYPE_CHECKING:
    from ..client import Spotify

PlaylistItem = Union[Track, Episode]


def playlist_item_from_dict(
    client: "Spotify", item: Dict[str, Any]
) -> Optional[PlaylistItem]:
    """
    Build a Track or Episode from a playlist item.

    Playlist items wrap the playable object as ``{"added_at", "track"}``;
    the wrapped object may be an episode. Returns None for unavailable
    entries.
    """
    data = item.get("track")
    if not isinstance(data, dict):
        data = item.get("item")
    if not isinstance(data, dict):
        return None
    if data.get("type") == "episode":
        return Episode.from_dict(client, data)
    return Track.from_dict(client, data)


@dataclass
class Playlist:
    """A Spotify playlist, with its first page of items when included."""

    id: str
    name: str
    uri: Optional[str] = None
    description: Optional[str] = None
    public: Optional[bool] = None
    collaborative: bool = False
    snapshot_id: Optional[str] = None
    owner: Optional[User] = None
    total_tracks: Optional[int] = None
    tracks: List[PlaylistItem] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    client: Optional["Spotify"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, client: "Spotify", data: Dict[str, Any]) -> "Playlist":
        owner = data.get("owner")
        tracks_meta = data.get("tracks")
        items = [playlist_item_from_dict(client, i) for i in page_items(tracks_meta)]
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            uri=data.get("uri"),
            description=data.get("description"),
            public=data.get("public"),
            collaborative=data.get("collaborative", False),
            snapshot_id=data.get("snapshot_id"),
            owner=User.from_dict(client, owner) if owner else None,
            total_tracks=tracks_meta.get("total") if isinstance(tracks_meta, dict) else None,
            tracks=[i for i in items if i is not None],
            raw=data,
            client=client,
        )

    async def play(self, **options) -> Dict[str, Any]:
        return await self.client.player.start(self.uri, **options)

    async def modify(self, **options) -> Dict[str, Any]:
        return await self.client.playlists.modify(self.id, **options)

    async def add(self, uris, position: Optional[int] = None) -> str:
        """Add items and remember the new snapshot id."""
        self.snapshot_id = await self.client.playlists.add(self.id, uris, position)
        return self.snapshot_id

    async def remove(self, uris, snapshot_id: Optional[str] = None) -> str:
        self.snapshot_id = await self.client.playlists.remove(
            self.id, uris, snapshot_id or self.snapshot_id,
        )
        return self.snapshot_id

    async def follow(self, public: bool = True) -> Dict[str, Any]:
        return await self.client.playlists.follow(self.id, public)

    async def unfollow(self) -> Dict[str, Any]:
        return await self.client.playlists.unfollow(self.id)

    async def followers_contain(self, user_ids) -> List[bool]:
        return await self.client.playlists.followers_contain(self.id, user_ids)

    async def cover(self, image: Optional[str] = None) -> Any:
        return await self.client.playlists.cover(self.id, image)

    async def refresh_tracks(self, limit: int = 100, offset: int = 0) -> List[PlaylistItem]:
        """Reload a page of items from the API into ``tracks``."""
        self.tracks = await self.client.playlists.tracks(self.id, limit=limit, offset=offset)
        return self.tracks

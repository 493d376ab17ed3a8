from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .artist import Artist
from .utils import page_items

if TYPE_CHECKING:
    from ..client import Spotify
    from .track import Track


@dataclass
class Album:
    """A Spotify album, with its tracks when the payload includes them."""

    id: str
    name: str
    uri: Optional[str] = None
    album_type: Optional[str] = None
    release_date: Optional[str] = None
    total_tracks: Optional[int] = None
    artists: List[Artist] = field(default_factory=list)
    images: List[Dict[str, Any]] = field(default_factory=list)
    tracks: List["Track"] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    client: Optional["Spotify"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, client: "Spotify", data: Dict[str, Any]) -> "Album":
        from .track import Track

        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            uri=data.get("uri"),
            album_type=data.get("album_type"),
            release_date=data.get("release_date"),
            total_tracks=data.get("total_tracks"),
            artists=[Artist.from_dict(client, a) for a in data.get("artists", [])],
            images=data.get("images", []),
            tracks=[Track.from_dict(client, t) for t in page_items(data.get("tracks"))],
            raw=data,
            client=client,
        )

    async def play(self, **options) -> Dict[str, Any]:
        """Start playback with this album as the context."""
        return await self.client.player.start(self.uri, **options)

    async def save(self) -> Dict[str, Any]:
        return await self.client.albums.save(self.id)

    async def remove(self) -> Dict[str, Any]:
        return await self.client.albums.remove(self.id)

    async def is_saved(self) -> bool:
        result = await self.client.albums.contains(self.id)
        return bool(result and result[0])

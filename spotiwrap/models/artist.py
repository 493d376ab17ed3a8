from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import Spotify
    from .album import Album
    from .track import Track


@dataclass
class Artist:
    """A Spotify artist."""

    id: str
    name: str
    uri: Optional[str] = None
    genres: List[str] = field(default_factory=list)
    popularity: Optional[int] = None
    followers: Optional[int] = None
    images: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    client: Optional["Spotify"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, client: "Spotify", data: Dict[str, Any]) -> "Artist":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            uri=data.get("uri"),
            genres=data.get("genres", []),
            popularity=data.get("popularity"),
            followers=(data.get("followers") or {}).get("total"),
            images=data.get("images", []),
            raw=data,
            client=client,
        )

    async def albums(self, **options) -> List["Album"]:
        return await self.client.artists.albums(self.id, **options)

    async def top_tracks(self, country: str) -> List["Track"]:
        return await self.client.artists.top_tracks(self.id, country)

    async def related(self) -> List["Artist"]:
        return await self.client.artists.related(self.id)

    async def follow(self) -> Dict[str, Any]:
        return await self.client.artists.follow(self.id)

    async def unfollow(self) -> Dict[str, Any]:
        return await self.client.artists.unfollow(self.id)

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import Spotify
    from .playlist import Playlist


@dataclass
class User:
    """A Spotify user profile."""

    id: str
    display_name: Optional[str] = None
    uri: Optional[str] = None
    country: Optional[str] = None
    product: Optional[str] = None
    followers: Optional[int] = None
    images: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    client: Optional["Spotify"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, client: "Spotify", data: Dict[str, Any]) -> "User":
        return cls(
            id=data.get("id"),
            display_name=data.get("display_name"),
            uri=data.get("uri"),
            country=data.get("country"),
            product=data.get("product"),
            followers=(data.get("followers") or {}).get("total"),
            images=data.get("images", []),
            raw=data,
            client=client,
        )

    async def playlists(self, limit: int = 20, offset: int = 0) -> List["Playlist"]:
        """Public playlists owned or followed by this user."""
        return await self.client.playlists.user_playlists(
            self.id, limit=limit, offset=offset,
        )

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .episode import Episode
from .utils import page_items

if TYPE_CHECKING:
    from ..client import Spotify


@dataclass
class Show:
    """A podcast show."""

    id: str
    name: str
    uri: Optional[str] = None
    publisher: Optional[str] = None
    description: Optional[str] = None
    total_episodes: Optional[int] = None
    episodes: List[Episode] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    client: Optional["Spotify"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, client: "Spotify", data: Dict[str, Any]) -> "Show":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            uri=data.get("uri"),
            publisher=data.get("publisher"),
            description=data.get("description"),
            total_episodes=data.get("total_episodes"),
            episodes=[Episode.from_dict(client, e) for e in page_items(data.get("episodes"))],
            raw=data,
            client=client,
        )

    async def play(self, **options) -> Dict[str, Any]:
        return await self.client.player.start(self.uri, **options)

    async def save(self) -> Dict[str, Any]:
        return await self.client.shows.save(self.id)

    async def remove(self) -> Dict[str, Any]:
        return await self.client.shows.remove(self.id)

    async def is_saved(self) -> bool:
        result = await self.client.shows.contains(self.id)
        return bool(result and result[0])

    async def fetch_episodes(self, limit: int = 20, offset: int = 0) -> List[Episode]:
        return await self.client.shows.episodes(self.id, limit=limit, offset=offset)

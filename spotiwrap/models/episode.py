from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import Spotify


@dataclass
class Episode:
    """A podcast episode."""

    id: str
    name: str
    uri: Optional[str] = None
    description: Optional[str] = None
    duration_ms: Optional[int] = None
    release_date: Optional[str] = None
    images: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    client: Optional["Spotify"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, client: "Spotify", data: Dict[str, Any]) -> "Episode":
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            uri=data.get("uri"),
            description=data.get("description"),
            duration_ms=data.get("duration_ms"),
            release_date=data.get("release_date"),
            images=data.get("images", []),
            raw=data,
            client=client,
        )

    async def save(self) -> Dict[str, Any]:
        return await self.client.episodes.save(self.id)

    async def remove(self) -> Dict[str, Any]:
        return await self.client.episodes.remove(self.id)

    async def is_saved(self) -> bool:
        result = await self.client.episodes.contains(self.id)
        return bool(result and result[0])

    async def queue(self, device_id: Optional[str] = None) -> Dict[str, Any]:
        return await self.client.player.queue(self.uri, device_id)

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .album import Album
from .artist import Artist

if TYPE_CHECKING:
    from ..client import Spotify


@dataclass
class Track:
    """A Spotify track."""

    id: Optional[str]
    name: str
    uri: Optional[str] = None
    duration_ms: Optional[int] = None
    explicit: bool = False
    popularity: Optional[int] = None
    track_number: Optional[int] = None
    is_local: bool = False
    artists: List[Artist] = field(default_factory=list)
    album: Optional[Album] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)
    client: Optional["Spotify"] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, client: "Spotify", data: Dict[str, Any]) -> "Track":
        album = data.get("album")
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            uri=data.get("uri"),
            duration_ms=data.get("duration_ms"),
            explicit=data.get("explicit", False),
            popularity=data.get("popularity"),
            track_number=data.get("track_number"),
            is_local=data.get("is_local", False),
            artists=[Artist.from_dict(client, a) for a in data.get("artists", [])],
            album=Album.from_dict(client, album) if album else None,
            raw=data,
            client=client,
        )

    async def save(self) -> Dict[str, Any]:
        return await self.client.tracks.save(self.id)

    async def remove(self) -> Dict[str, Any]:
        return await self.client.tracks.remove(self.id)

    async def is_saved(self) -> bool:
        result = await self.client.tracks.contains(self.id)
        return bool(result and result[0])

    async def queue(self, device_id: Optional[str] = None) -> Dict[str, Any]:
        """Add this track to the end of the playback queue."""
        return await self.client.player.queue(self.uri, device_id)

    async def audio_features(self) -> Dict[str, Any]:
        return await self.client.tracks.audio.features(self.id)

    async def audio_analysis(self) -> Dict[str, Any]:
        return await self.client.tracks.audio.analysis(self.id)

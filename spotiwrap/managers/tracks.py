"""Track endpoints, saved tracks and recommendations."""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union, TYPE_CHECKING

from ..enums import HTTPMethod, SearchType
from ..models import Track
from ..url_parser import join_ids, to_spotify_id
from .audio import AudioManager
from .base import BaseManager, DEFAULT_LIMIT

if TYPE_CHECKING:
    from ..client import Spotify

logger = logging.getLogger(__name__)

Ids = Union[str, Iterable[str]]

# Tunable track attributes accepted as min_/max_/target_ parameters
TUNABLE_ATTRIBUTES = frozenset({
    "acousticness",
    "danceability",
    "duration_ms",
    "energy",
    "instrumentalness",
    "key",
    "liveness",
    "loudness",
    "mode",
    "popularity",
    "speechiness",
    "tempo",
    "time_signature",
    "valence",
})

MAX_SEEDS = 5


class TrackManager(BaseManager):
    """Catalog tracks, the user's saved tracks, and recommendations."""

    def __init__(self, client: "Spotify", base_url: str, audio: Optional[AudioManager] = None):
        super().__init__(client, base_url)
        self.audio = audio or AudioManager(client, base_url)

    async def get(self, track_id: str, market: Optional[str] = None) -> Track:
        body = await self._request(
            "tracks", to_spotify_id(track_id), params={"market": market},
        )
        return Track.from_dict(self.client, body)

    async def saved(self, limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Track]:
        body = await self._request(
            "me", "tracks", params={"limit": limit, "offset": offset},
        )
        return [
            Track.from_dict(self.client, item["track"])
            for item in body.get("items", [])
            if item and item.get("track")
        ]

    async def save(self, ids: Ids) -> Dict[str, Any]:
        return await self._request(
            "me", "tracks", method=HTTPMethod.PUT, params={"ids": join_ids(ids)},
        )

    async def remove(self, ids: Ids) -> Dict[str, Any]:
        return await self._request(
            "me", "tracks", method=HTTPMethod.DELETE, params={"ids": join_ids(ids)},
        )

    async def contains(self, ids: Ids) -> List[bool]:
        return await self._request(
            "me", "tracks", "contains", params={"ids": join_ids(ids)},
        )

    async def search(self, query: str, include_external: bool = False,
                     limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Track]:
        return await self._search(
            query, SearchType.TRACK, Track.from_dict,
            include_external=include_external, limit=limit, offset=offset,
        )

    async def recommendations(
        self,
        seed_artists: Iterable[str] = (),
        seed_genres: Iterable[str] = (),
        seed_tracks: Iterable[str] = (),
        limit: int = DEFAULT_LIMIT,
        market: Optional[str] = None,
        min_attributes: Optional[Mapping[str, Any]] = None,
        max_attributes: Optional[Mapping[str, Any]] = None,
        target_attributes: Optional[Mapping[str, Any]] = None,
    ) -> List[Track]:
        """
        Get track recommendations for up to five seeds.

        Args:
            seed_artists: Artist IDs or URIs.
            seed_genres: Genre names from the available genre seeds.
            seed_tracks: Track IDs or URIs.
            limit: Number of tracks to return (1-100).
            market: Optional ISO 3166-1 alpha-2 country code.
            min_attributes: Lower bounds, e.g. ``{"energy": 0.4}``.
            max_attributes: Upper bounds.
            target_attributes: Target values.

        Raises:
            ValueError: If there are no seeds, more than five seeds, or an
                unknown tunable attribute.
        """
        artists = [to_spotify_id(a) for a in seed_artists]
        tracks = [to_spotify_id(t) for t in seed_tracks]
        genres = list(seed_genres)

        seed_count = len(artists) + len(tracks) + len(genres)
        if seed_count == 0:
            raise ValueError("At least one seed artist, genre or track is required")
        if seed_count > MAX_SEEDS:
            raise ValueError(f"At most {MAX_SEEDS} seeds may be given, got {seed_count}")

        params: Dict[str, Any] = {
            "seed_artists": ",".join(artists) or None,
            "seed_genres": ",".join(genres) or None,
            "seed_tracks": ",".join(tracks) or None,
            "limit": limit,
            "market": market,
        }
        for prefix, attributes in (
            ("min", min_attributes),
            ("max", max_attributes),
            ("target", target_attributes),
        ):
            for name, value in (attributes or {}).items():
                if name not in TUNABLE_ATTRIBUTES:
                    raise ValueError(f"Unknown tunable attribute: {name}")
                params[f"{prefix}_{name}"] = value

        body = await self._request("recommendations", params=params)
        return self._build(Track.from_dict, body.get("tracks"))

"""Album endpoints."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..enums import HTTPMethod, SearchType
from ..models import Album, Track
from ..url_parser import join_ids, to_spotify_id
from .base import BaseManager, DEFAULT_LIMIT

logger = logging.getLogger(__name__)

Ids = Union[str, Iterable[str]]


class AlbumManager(BaseManager):
    """Catalog albums and the current user's saved albums."""

    async def get(self, album_id: str, market: Optional[str] = None) -> Album:
        """Get Spotify catalog information for a single album."""
        body = await self._request(
            "albums", to_spotify_id(album_id), params={"market": market},
        )
        return Album.from_dict(self.client, body)

    async def tracks(
        self,
        album_id: str,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        market: Optional[str] = None,
    ) -> List[Track]:
        """Get a page of an album's tracks."""
        body = await self._request(
            "albums", to_spotify_id(album_id), "tracks",
            params={"limit": limit, "offset": offset, "market": market},
        )
        return self._build(Track.from_dict, body)

    async def saved(self, limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Album]:
        """Get albums saved in the current user's library."""
        body = await self._request(
            "me", "albums", params={"limit": limit, "offset": offset},
        )
        # Saved items are wrapped as {"added_at": ..., "album": {...}}
        return [
            Album.from_dict(self.client, item["album"])
            for item in body.get("items", [])
            if item and item.get("album")
        ]

    async def save(self, ids: Ids) -> Dict[str, Any]:
        """Save one or more albums to the current user's library."""
        return await self._request(
            "me", "albums", method=HTTPMethod.PUT, params={"ids": join_ids(ids)},
        )

    async def remove(self, ids: Ids) -> Dict[str, Any]:
        """Remove one or more albums from the current user's library."""
        return await self._request(
            "me", "albums", method=HTTPMethod.DELETE, params={"ids": join_ids(ids)},
        )

    async def contains(self, ids: Ids) -> List[bool]:
        """Check whether albums are saved in the current user's library."""
        return await self._request(
            "me", "albums", "contains", params={"ids": join_ids(ids)},
        )

    async def new_releases(
        self,
        country: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[Album]:
        """Get new album releases featured in Spotify."""
        body = await self._request(
            "browse", "new-releases",
            params={"country": country, "limit": limit, "offset": offset},
        )
        return self._build(Album.from_dict, body.get("albums"))

    async def search(self, query: str, include_external: bool = False,
                     limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Album]:
        return await self._search(
            query, SearchType.ALBUM, Album.from_dict,
            include_external=include_external, limit=limit, offset=offset,
        )

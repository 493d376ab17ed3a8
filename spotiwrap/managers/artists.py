"""Artist endpoints, including following artists."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..enums import AlbumGroup, HTTPMethod, SearchType
from ..models import Album, Artist, Track
from ..url_parser import join_ids, to_spotify_id
from .base import BaseManager, DEFAULT_LIMIT

logger = logging.getLogger(__name__)

Ids = Union[str, Iterable[str]]


class ArtistManager(BaseManager):
    """Catalog artists and the current user's followed artists."""

    async def get(self, artist_id: str) -> Artist:
        """Get Spotify catalog information for a single artist."""
        body = await self._request("artists", to_spotify_id(artist_id))
        return Artist.from_dict(self.client, body)

    async def albums(
        self,
        artist_id: str,
        include_groups: Optional[Iterable[Union[str, AlbumGroup]]] = None,
        market: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[Album]:
        """
        Get an artist's albums.

        Args:
            artist_id: The artist ID, URI or URL.
            include_groups: Album groups to keep, e.g. ``[AlbumGroup.SINGLE]``.
                All groups are returned when omitted.
            market: Optional ISO 3166-1 alpha-2 country code.
            limit: Maximum number of albums (1-50).
            offset: Index of the first album.
        """
        groups = None
        if include_groups:
            groups = ",".join(str(AlbumGroup(g)) for g in include_groups)

        body = await self._request(
            "artists", to_spotify_id(artist_id), "albums",
            params={
                "include_groups": groups,
                "market": market,
                "limit": limit,
                "offset": offset,
            },
        )
        return self._build(Album.from_dict, body)

    async def follow(self, ids: Ids) -> Dict[str, Any]:
        """Follow one or more artists as the current user."""
        return await self._request(
            "me", "following", method=HTTPMethod.PUT,
            params={"type": "artist", "ids": join_ids(ids)},
        )

    async def unfollow(self, ids: Ids) -> Dict[str, Any]:
        """Unfollow one or more artists."""
        return await self._request(
            "me", "following", method=HTTPMethod.DELETE,
            params={"type": "artist", "ids": join_ids(ids)},
        )

    async def is_following(self, ids: Ids) -> List[bool]:
        """Check whether the current user follows the given artists."""
        return await self._request(
            "me", "following", "contains",
            params={"type": "artist", "ids": join_ids(ids)},
        )

    async def top_tracks(self, artist_id: str, country: str) -> List[Track]:
        """Get an artist's top tracks in a country."""
        if not country:
            raise ValueError("country is required for top tracks")
        body = await self._request(
            "artists", to_spotify_id(artist_id), "top-tracks",
            params={"country": country},
        )
        return self._build(Track.from_dict, body.get("tracks"))

    async def related(self, artist_id: str) -> List[Artist]:
        """Get artists similar to the given artist."""
        body = await self._request(
            "artists", to_spotify_id(artist_id), "related-artists",
        )
        return self._build(Artist.from_dict, body.get("artists"))

    async def search(self, query: str, include_external: bool = False,
                     limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Artist]:
        return await self._search(
            query, SearchType.ARTIST, Artist.from_dict,
            include_external=include_external, limit=limit, offset=offset,
        )

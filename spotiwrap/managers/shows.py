"""Podcast show endpoints."""

from typing import Any, Dict, Iterable, List, Optional, Union

from ..enums import HTTPMethod, SearchType
from ..models import Episode, Show
from ..url_parser import join_ids, to_spotify_id
from .base import BaseManager, DEFAULT_LIMIT

Ids = Union[str, Iterable[str]]


class ShowManager(BaseManager):
    """Catalog shows and the current user's saved shows."""

    async def get(self, show_id: str, market: Optional[str] = None) -> Show:
        body = await self._request(
            "shows", to_spotify_id(show_id), params={"market": market},
        )
        return Show.from_dict(self.client, body)

    async def episodes(
        self,
        show_id: str,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        market: Optional[str] = None,
    ) -> List[Episode]:
        body = await self._request(
            "shows", to_spotify_id(show_id), "episodes",
            params={"limit": limit, "offset": offset, "market": market},
        )
        return self._build(Episode.from_dict, body)

    async def saved(self, limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Show]:
        body = await self._request(
            "me", "shows", params={"limit": limit, "offset": offset},
        )
        return [
            Show.from_dict(self.client, item["show"])
            for item in body.get("items", [])
            if item and item.get("show")
        ]

    async def save(self, ids: Ids) -> Dict[str, Any]:
        return await self._request(
            "me", "shows", method=HTTPMethod.PUT, params={"ids": join_ids(ids)},
        )

    async def remove(self, ids: Ids) -> Dict[str, Any]:
        return await self._request(
            "me", "shows", method=HTTPMethod.DELETE, params={"ids": join_ids(ids)},
        )

    async def contains(self, ids: Ids) -> List[bool]:
        return await self._request(
            "me", "shows", "contains", params={"ids": join_ids(ids)},
        )

    async def search(self, query: str, include_external: bool = False,
                     limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Show]:
        return await self._search(
            query, SearchType.SHOW, Show.from_dict,
            include_external=include_external, limit=limit, offset=offset,
        )

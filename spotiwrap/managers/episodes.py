"""Podcast episode endpoints."""

from typing import Any, Dict, Iterable, List, Optional, Union

from ..enums import HTTPMethod, SearchType
from ..models import Episode
from ..url_parser import join_ids, to_spotify_id
from .base import BaseManager, DEFAULT_LIMIT

Ids = Union[str, Iterable[str]]


class EpisodeManager(BaseManager):
    """Catalog episodes and the current user's saved episodes."""

    async def get(self, episode_id: str, market: Optional[str] = None) -> Episode:
        body = await self._request(
            "episodes", to_spotify_id(episode_id), params={"market": market},
        )
        return Episode.from_dict(self.client, body)

    async def saved(self, limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Episode]:
        body = await self._request(
            "me", "episodes", params={"limit": limit, "offset": offset},
        )
        return [
            Episode.from_dict(self.client, item["episode"])
            for item in body.get("items", [])
            if item and item.get("episode")
        ]

    async def save(self, ids: Ids) -> Dict[str, Any]:
        return await self._request(
            "me", "episodes", method=HTTPMethod.PUT, params={"ids": join_ids(ids)},
        )

    async def remove(self, ids: Ids) -> Dict[str, Any]:
        return await self._request(
            "me", "episodes", method=HTTPMethod.DELETE, params={"ids": join_ids(ids)},
        )

    async def contains(self, ids: Ids) -> List[bool]:
        return await self._request(
            "me", "episodes", "contains", params={"ids": join_ids(ids)},
        )

    async def search(self, query: str, include_external: bool = False,
                     limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Episode]:
        return await self._search(
            query, SearchType.EPISODE, Episode.from_dict,
            include_external=include_external, limit=limit, offset=offset,
        )

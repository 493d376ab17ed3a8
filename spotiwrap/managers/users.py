"""User profile endpoints."""

from typing import List, Optional, Union

from ..enums import TimeRange, TopItemType
from ..models import Artist, Track, User
from .base import BaseManager, DEFAULT_LIMIT


class UserManager(BaseManager):
    """Public profiles and the current user's profile, top items and follows."""

    async def get(self, user_id: str) -> User:
        body = await self._request("users", user_id)
        return User.from_dict(self.client, body)

    async def me(self) -> User:
        """Get the current user's profile."""
        body = await self._request("me")
        return User.from_dict(self.client, body)

    async def top(
        self,
        item_type: Union[str, TopItemType],
        time_range: Union[str, TimeRange] = TimeRange.MEDIUM,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> Union[List[Artist], List[Track]]:
        """
        Get the current user's top artists or tracks.

        Args:
            item_type: ``artists`` or ``tracks``.
            time_range: Affinity window; ``short_term`` (about 4 weeks),
                ``medium_term`` (about 6 months) or ``long_term``.
            limit: Maximum number of items (1-50).
            offset: Index of the first item.
        """
        item_type = TopItemType(item_type)
        body = await self._request(
            "me", "top", str(item_type),
            params={
                "time_range": str(TimeRange(time_range)),
                "limit": limit,
                "offset": offset,
            },
        )
        factory = Artist.from_dict if item_type == TopItemType.ARTISTS else Track.from_dict
        return self._build(factory, body)

    async def followed_artists(
        self, after: Optional[str] = None, limit: int = DEFAULT_LIMIT,
    ) -> List[Artist]:
        """
        Get artists the current user follows.

        Args:
            after: The last artist ID from the previous page (cursor).
            limit: Maximum number of artists (1-50).
        """
        body = await self._request(
            "me", "following",
            params={"type": "artist", "after": after, "limit": limit},
        )
        return self._build(Artist.from_dict, body.get("artists"))

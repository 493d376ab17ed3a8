"""Browse category endpoints."""

from typing import Any, Dict, List, Optional

from .base import BaseManager, DEFAULT_LIMIT


class CategoryManager(BaseManager):
    """Categories used to tag items in Spotify."""

    async def get(
        self,
        category_id: str,
        country: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Get a single category.

        Args:
            category_id: The Spotify category ID.
            country: Optional ISO 3166-1 alpha-2 country code.
            locale: Optional language and country joined by an underscore,
                e.g. ``es_MX``.
        """
        return await self._request(
            "browse", "categories", category_id,
            params={"country": country, "locale": locale},
        )

    async def all(
        self,
        country: Optional[str] = None,
        locale: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[Dict[str, Any]]:
        """Get a page of categories."""
        body = await self._request(
            "browse", "categories",
            params={
                "country": country,
                "locale": locale,
                "limit": limit,
                "offset": offset,
            },
        )
        return (body.get("categories") or {}).get("items", [])

"""
Shared manager plumbing.

Every resource manager builds URLs from the configured base URL and sends
them through the client's request pipeline; the helpers here keep that
(and the search endpoint, which every resource family exposes) in one place.
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar, TYPE_CHECKING

from ..enums import HTTPMethod, SearchType
from ..models.utils import page_items

if TYPE_CHECKING:
    from ..client import Spotify

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LIMIT = 20


class BaseManager:
    """Holds the owning client and the API base URL."""

    def __init__(self, client: "Spotify", base_url: str):
        self._client = client
        self._base_url = base_url.rstrip("/")

    @property
    def client(self) -> "Spotify":
        return self._client

    def _url(self, *parts: str) -> str:
        """Build ``<base_url>/part/part`` from path segments."""
        return "/".join([self._base_url, *(str(p).strip("/") for p in parts)])

    async def _request(
        self,
        *parts: str,
        method: str = HTTPMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        return await self._client.request(
            self._url(*parts),
            method=method,
            body=body,
            headers=headers,
            params=params,
        )

    def _build(self, factory: Callable[["Spotify", Dict[str, Any]], T], items: Any) -> List[T]:
        """Wrap each payload in ``items`` (a list or paging object)."""
        return [factory(self._client, item) for item in page_items(items)]

    async def _search(
        self,
        query: str,
        search_type: SearchType,
        factory: Callable[["Spotify", Dict[str, Any]], T],
        include_external: bool = False,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
        market: Optional[str] = None,
    ) -> List[T]:
        """
        Search the catalog for one item type.

        Args:
            query: Search query, may use Spotify field filters.
            search_type: The item type to search for.
            factory: Model constructor for each result.
            include_external: Include externally hosted audio content.
            limit: Maximum number of results (1-50).
            offset: Index of the first result.
            market: Optional ISO 3166-1 alpha-2 country code.
        """
        if not query or not query.strip():
            raise ValueError("Search query cannot be empty")

        params = {
            "q": query,
            "type": str(search_type),
            "limit": limit,
            "offset": offset,
            "market": market,
        }
        if include_external:
            params["include_external"] = "audio"

        body = await self._request("search", params=params)
        # Results are keyed by the plural type: {"albums": {"items": [...]}}
        results = self._build(factory, body.get(f"{search_type}s"))
        logger.debug("Search %r (%s) returned %d results", query, search_type, len(results))
        return results

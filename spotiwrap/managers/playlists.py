"""Playlist endpoints."""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..enums import HTTPMethod, SearchType
from ..models import Playlist, PlaylistItem, playlist_item_from_dict
from ..url_parser import join_ids, to_spotify_id
from .base import BaseManager, DEFAULT_LIMIT

logger = logging.getLogger(__name__)

Uris = Union[str, Iterable[str]]

# Maximum number of items per add/remove request
BATCH_SIZE = 100


def _uri_list(uris: Uris) -> List[str]:
    uri_list = [uris] if isinstance(uris, str) else list(uris)
    if not uri_list:
        raise ValueError("At least one URI is required")
    if len(uri_list) > BATCH_SIZE:
        raise ValueError(f"At most {BATCH_SIZE} URIs per request, got {len(uri_list)}")
    return uri_list


def _details(
    name: Optional[str],
    public: Optional[bool],
    collaborative: Optional[bool],
    description: Optional[str],
) -> Dict[str, Any]:
    details = {
        "name": name,
        "public": public,
        "collaborative": collaborative,
        "description": description,
    }
    return {k: v for k, v in details.items() if v is not None}


class PlaylistManager(BaseManager):
    """Playlists: reading, editing items and details, following, covers."""

    async def get(
        self,
        playlist_id: str,
        additional_types: Iterable[str] = ("track",),
        fields: Optional[str] = None,
        market: Optional[str] = None,
    ) -> Playlist:
        """
        Get a playlist.

        Args:
            playlist_id: The playlist ID, URI or URL.
            additional_types: Item types the caller supports besides
                tracks, e.g. ``("track", "episode")``.
            fields: Optional field filter, e.g. ``"name,tracks.items(track(name))"``.
            market: Optional ISO 3166-1 alpha-2 country code.
        """
        body = await self._request(
            "playlists", to_spotify_id(playlist_id),
            params={
                "additional_types": ",".join(additional_types),
                "fields": fields,
                "market": market,
            },
        )
        return Playlist.from_dict(self.client, body)

    async def modify(
        self,
        playlist_id: str,
        name: Optional[str] = None,
        public: Optional[bool] = None,
        collaborative: Optional[bool] = None,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Change a playlist's details. Only the given fields are sent."""
        body = _details(name, public, collaborative, description)
        if not body:
            raise ValueError("Nothing to modify")
        return await self._request(
            "playlists", to_spotify_id(playlist_id), method=HTTPMethod.PUT, body=body,
        )

    async def tracks(
        self,
        playlist_id: str,
        additional_types: Iterable[str] = ("track",),
        fields: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[PlaylistItem]:
        """Get a page of a playlist's items as Track or Episode models."""
        body = await self._request(
            "playlists", to_spotify_id(playlist_id), "tracks",
            params={
                "additional_types": ",".join(additional_types),
                "fields": fields,
                "limit": limit,
                "offset": offset,
            },
        )
        items = (playlist_item_from_dict(self.client, i) for i in body.get("items") or [] if i)
        return [item for item in items if item is not None]

    async def add(self, playlist_id: str, uris: Uris, position: Optional[int] = None) -> str:
        """
        Add up to 100 track or episode URIs to a playlist.

        Returns:
            The playlist's new snapshot ID.
        """
        body = {"uris": _uri_list(uris)}
        if position is not None:
            body["position"] = position
        result = await self._request(
            "playlists", to_spotify_id(playlist_id), "tracks",
            method=HTTPMethod.POST, body=body,
        )
        return result.get("snapshot_id")

    async def remove(self, playlist_id: str, uris: Uris, snapshot_id: Optional[str] = None) -> str:
        """
        Remove all occurrences of up to 100 URIs from a playlist.

        Returns:
            The playlist's new snapshot ID.
        """
        body: Dict[str, Any] = {"tracks": [{"uri": uri} for uri in _uri_list(uris)]}
        if snapshot_id:
            body["snapshot_id"] = snapshot_id
        result = await self._request(
            "playlists", to_spotify_id(playlist_id), "tracks",
            method=HTTPMethod.DELETE, body=body,
        )
        return result.get("snapshot_id")

    async def user_playlists(
        self,
        user_id: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[Playlist]:
        """Get playlists of a user, or of the current user when user_id is omitted."""
        parts = ("users", user_id, "playlists") if user_id else ("me", "playlists")
        body = await self._request(*parts, params={"limit": limit, "offset": offset})
        return self._build(Playlist.from_dict, body)

    async def follow(self, playlist_id: str, public: bool = True) -> Dict[str, Any]:
        return await self._request(
            "playlists", to_spotify_id(playlist_id), "followers",
            method=HTTPMethod.PUT, body={"public": public},
        )

    async def unfollow(self, playlist_id: str) -> Dict[str, Any]:
        return await self._request(
            "playlists", to_spotify_id(playlist_id), "followers",
            method=HTTPMethod.DELETE,
        )

    async def followers_contain(self, playlist_id: str, user_ids: Union[str, Iterable[str]]) -> List[bool]:
        """Check whether users follow a playlist."""
        return await self._request(
            "playlists", to_spotify_id(playlist_id), "followers", "contains",
            params={"ids": join_ids(user_ids)},
        )

    async def create(
        self,
        user_id: str,
        name: str,
        public: Optional[bool] = None,
        collaborative: Optional[bool] = None,
        description: Optional[str] = None,
    ) -> Playlist:
        """Create a playlist for a user."""
        if not name or not name.strip():
            raise ValueError("Playlist name cannot be empty")
        body = await self._request(
            "users", user_id, "playlists",
            method=HTTPMethod.POST,
            body=_details(name, public, collaborative, description),
        )
        logger.info("Created playlist %s for user %s", body.get("id"), user_id)
        return Playlist.from_dict(self.client, body)

    async def featured(
        self,
        locale: Optional[str] = None,
        timestamp: Optional[str] = None,
        limit: int = DEFAULT_LIMIT,
        offset: int = 0,
    ) -> List[Playlist]:
        """Get Spotify's featured playlists."""
        body = await self._request(
            "browse", "featured-playlists",
            params={
                "locale": locale,
                "timestamp": timestamp,
                "limit": limit,
                "offset": offset,
            },
        )
        return self._build(Playlist.from_dict, body.get("playlists"))

    async def by_category(
        self, category_id: str, limit: int = DEFAULT_LIMIT, offset: int = 0,
    ) -> List[Playlist]:
        """Get playlists tagged with a browse category."""
        body = await self._request(
            "browse", "categories", category_id, "playlists",
            params={"limit": limit, "offset": offset},
        )
        return self._build(Playlist.from_dict, body.get("playlists"))

    async def cover(self, playlist_id: str, image: Optional[str] = None) -> Any:
        """
        Get a playlist's cover images, or upload a new cover.

        Args:
            playlist_id: The playlist ID, URI or URL.
            image: Base64-encoded JPEG to upload. When omitted the current
                cover images are returned.

        Returns:
            The list of image objects, or a status marker after upload.
        """
        playlist_id = to_spotify_id(playlist_id)
        if image is None:
            return await self._request("playlists", playlist_id, "images")
        return await self._request(
            "playlists", playlist_id, "images",
            method=HTTPMethod.PUT,
            body=image,
            headers={"Content-Type": "image/jpeg"},
        )

    async def search(self, query: str, include_external: bool = False,
                     limit: int = DEFAULT_LIMIT, offset: int = 0) -> List[Playlist]:
        return await self._search(
            query, SearchType.PLAYLIST, Playlist.from_dict,
            include_external=include_external, limit=limit, offset=offset,
        )

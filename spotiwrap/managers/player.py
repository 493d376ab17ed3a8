"""
Playback control endpoints.

Commands target the user's active device unless a device ID is given.
Most commands answer 204 No Content, which comes back as a status marker.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from ..enums import HTTPMethod, RepeatState
from ..models import Episode, Track
from ..url_parser import parse_spotify_uri
from .base import BaseManager, DEFAULT_LIMIT

logger = logging.getLogger(__name__)

MAX_RECENT_LIMIT = 50


class PlayerManager(BaseManager):
    """The current user's playback state and controls."""

    async def _command(
        self,
        action: Optional[str],
        method: str,
        device_id: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        body: Any = None,
    ) -> Dict[str, Any]:
        parts = ("me", "player", action) if action else ("me", "player")
        query = dict(params or {})
        query["device_id"] = device_id
        return await self._request(*parts, method=method, params=query, body=body)

    async def state(self, additional_types: Iterable[str] = ("track",)) -> Dict[str, Any]:
        """
        Get the current playback state.

        Returns ``{"status": 204}`` when nothing is playing.
        """
        return await self._request(
            "me", "player",
            params={"additional_types": ",".join(additional_types)},
        )

    async def transfer(self, device_id: str, play: bool = True) -> Dict[str, Any]:
        """Transfer playback to another device."""
        return await self._request(
            "me", "player",
            method=HTTPMethod.PUT,
            body={"device_ids": [device_id], "play": play},
        )

    async def devices(self) -> List[Dict[str, Any]]:
        """Get the user's available devices."""
        body = await self._request("me", "player", "devices")
        return body.get("devices", [])

    async def current(
        self, additional_types: Iterable[str] = ("track",),
    ) -> Optional[Union[Track, Episode]]:
        """Get the item currently playing, or None if nothing is."""
        body = await self._request(
            "me", "player", "currently-playing",
            params={"additional_types": ",".join(additional_types)},
        )
        item = body.get("item")
        if not item:
            return None
        if item.get("type") == "episode":
            return Episode.from_dict(self.client, item)
        return Track.from_dict(self.client, item)

    async def start(
        self,
        uri: str,
        device_id: Optional[str] = None,
        offset: int = 0,
        position_ms: int = 0,
    ) -> Dict[str, Any]:
        """
        Start playing a context or a single item.

        Album, artist, playlist and show URIs start as a context at
        ``offset``; track and episode URIs are played on their own.
        """
        parsed = parse_spotify_uri(uri)
        if parsed is None:
            raise ValueError(f"Not a Spotify URI: {uri!r}")

        body: Dict[str, Any] = {"position_ms": position_ms}
        if parsed.is_context:
            body["context_uri"] = parsed.uri
            if parsed.type != "artist":
                body["offset"] = {"position": offset}
        else:
            body["uris"] = [parsed.uri]

        return await self._command("play", HTTPMethod.PUT, device_id, body=body)

    async def resume(self, device_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._command("play", HTTPMethod.PUT, device_id)

    async def pause(self, device_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._command("pause", HTTPMethod.PUT, device_id)

    async def next(self, device_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._command("next", HTTPMethod.POST, device_id)

    async def previous(self, device_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._command("previous", HTTPMethod.POST, device_id)

    async def seek(self, position_ms: int, device_id: Optional[str] = None) -> Dict[str, Any]:
        """Seek to a position in the current item. Past the end skips to the next."""
        if position_ms < 0:
            raise ValueError("position_ms cannot be negative")
        return await self._command(
            "seek", HTTPMethod.PUT, device_id, params={"position_ms": position_ms},
        )

    async def repeat(
        self, state: Union[str, RepeatState], device_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        return await self._command(
            "repeat", HTTPMethod.PUT, device_id, params={"state": str(RepeatState(state))},
        )

    async def volume(self, percent: int, device_id: Optional[str] = None) -> Dict[str, Any]:
        if not 0 <= percent <= 100:
            raise ValueError(f"Volume must be between 0 and 100, got {percent}")
        return await self._command(
            "volume", HTTPMethod.PUT, device_id, params={"volume_percent": percent},
        )

    async def shuffle(self, state: bool, device_id: Optional[str] = None) -> Dict[str, Any]:
        return await self._command(
            "shuffle", HTTPMethod.PUT, device_id, params={"state": bool(state)},
        )

    async def recent(
        self,
        limit: int = DEFAULT_LIMIT,
        after: Optional[int] = None,
        before: Optional[int] = None,
    ) -> List[Track]:
        """
        Get recently played tracks.

        Args:
            limit: Maximum number of tracks (1-50).
            after: Unix timestamp in ms; only plays after this moment.
            before: Unix timestamp in ms; only plays before this moment.

        Raises:
            ValueError: If both ``after`` and ``before`` are given.
        """
        if after is not None and before is not None:
            raise ValueError("Only one of `after` or `before` can be provided.")
        if not 1 <= limit <= MAX_RECENT_LIMIT:
            raise ValueError(f"limit must be between 1 and {MAX_RECENT_LIMIT}")

        body = await self._request(
            "me", "player", "recently-played",
            params={"limit": limit, "after": after, "before": before},
        )
        return [
            Track.from_dict(self.client, item["track"])
            for item in body.get("items", [])
            if item and item.get("track")
        ]

    async def queue(self, uri: str, device_id: Optional[str] = None) -> Dict[str, Any]:
        """Add a track or episode URI to the end of the playback queue."""
        parsed = parse_spotify_uri(uri)
        if parsed is None or parsed.type not in ("track", "episode"):
            raise ValueError(f"Only track or episode URIs can be queued: {uri!r}")
        return await self._command(
            "queue", HTTPMethod.POST, device_id, params={"uri": parsed.uri},
        )

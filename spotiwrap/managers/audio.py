"""Audio features and analysis endpoints."""

from typing import Any, Dict

from ..url_parser import to_spotify_id
from .base import BaseManager


class AudioManager(BaseManager):

    async def features(self, track_id: str) -> Dict[str, Any]:
        """Get audio features (tempo, energy, valence, ...) for a track."""
        return await self._request("audio-features", to_spotify_id(track_id))

    async def analysis(self, track_id: str) -> Dict[str, Any]:
        """Get the low-level audio analysis for a track."""
        return await self._request("audio-analysis", to_spotify_id(track_id))

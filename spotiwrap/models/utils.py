"""Shared helpers for building models from API payloads."""

from typing import Any, Dict, List


def page_items(value: Any) -> List[Dict[str, Any]]:
    """
    Return the items of a paging object.

    Spotify nests lists as ``{"items": [...], "next": ...}`` in most places
    but as a bare list in a few. None entries (removed or unavailable
    items) are dropped.
    """
    if isinstance(value, dict):
        value = value.get("items")
    if not isinstance(value, list):
        return []
    return [item for item in value if item]

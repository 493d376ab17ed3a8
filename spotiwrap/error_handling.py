"""
Spotify API response classification.

Turns a raw httpx response into either the parsed body or one of the
classified exceptions from ``exceptions.py``. Spotify sometimes embeds an
error payload in a 2xx response; that payload is treated as authoritative.
"""

import json
import logging
from typing import Any, Dict

import httpx

from .exceptions import SpotifyAPIError, SpotifyHTTPError

logger = logging.getLogger(__name__)

# Sentinel for "no interpretable JSON body"
_NO_BODY = object()


def _parse_body(response: httpx.Response) -> Any:
    """Return the decoded JSON body, or _NO_BODY if empty or malformed."""
    if not response.content:
        return _NO_BODY
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.debug(
            "Response %d carried a non-JSON body (%d bytes)",
            response.status_code, len(response.content),
        )
        return _NO_BODY


def _error_payload(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize the two error shapes Spotify returns.

    Web API errors look like ``{"error": {"status": 404, "message": ...}}``;
    the accounts service uses ``{"error": "invalid_grant",
    "error_description": ...}``.
    """
    error = body["error"]
    if isinstance(error, dict):
        payload = dict(error)
        payload.setdefault("status", status_code)
        payload.setdefault("message", "")
        return payload
    return {
        "status": status_code,
        "message": body.get("error_description") or str(error),
    }


def _has_error(body: Any) -> bool:
    return isinstance(body, dict) and bool(body.get("error"))


def classify_response(response: httpx.Response) -> Any:
    """
    Classify a response into a result or a raised error.

    Returns:
        The parsed JSON body for a successful response, or a status marker
        ``{"status": <code>}`` when a 2xx response has no JSON body.

    Raises:
        SpotifyAPIError: If the body carries an error payload, whatever
            the HTTP status.
        SpotifyHTTPError: If the status is not 2xx and there is no error
            payload to report.
    """
    body = _parse_body(response)

    if _has_error(body):
        payload = _error_payload(response.status_code, body)
        raise SpotifyAPIError(
            response.status_code, payload["message"], payload=payload,
        )

    if response.is_success:
        if body is _NO_BODY:
            return {"status": response.status_code}
        return body

    raise SpotifyHTTPError(response.status_code, response.reason_phrase)

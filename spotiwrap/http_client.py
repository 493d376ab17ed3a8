"""
Asynchronous HTTP client for the Spotify Web API.

Wraps httpx.AsyncClient with bearer token injection, JSON body
serialization, and a single token refresh and retry on 401.
"""

import inspect
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

import httpx

from .config import ClientConfig
from .enums import HTTPMethod
from .error_handling import classify_response
from .exceptions import SpotifyTransportError

if TYPE_CHECKING:
    from .auth import TokenRefresher

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


@dataclass(frozen=True)
class RequestDescriptor:
    """
    One outbound request: everything needed to issue it again on retry.

    Attributes:
        path: Absolute request URL.
        method: GET, PUT, POST or DELETE (any case).
        body: Mapping/list to send as JSON, or a pre-serialized str/bytes
            payload sent unchanged.
        headers: Header overrides. Replaces the default JSON content type.
        params: Optional query parameters.
    """

    path: str
    method: str = HTTPMethod.GET
    body: Any = None
    headers: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_HEADERS)
    )
    params: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        if not self.path or not self.path.startswith(("http://", "https://")):
            raise ValueError(f"path must be an absolute URL, got {self.path!r}")
        # Raises ValueError for unsupported methods
        object.__setattr__(self, "method", HTTPMethod(str(self.method).upper()))

    def encoded_body(self) -> Optional[bytes]:
        """Serialize the body, or None if there is nothing to send."""
        if not self.body:
            return None
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return json.dumps(self.body).encode("utf-8")


class SpotifyHTTPClient:
    """
    Session state plus the request pipeline.

    Holds the current access token and an optional refresher. Every call
    goes through ``request``: issue once, and on a 401 ask the refresher
    for a new token and issue the same request one more time.
    """

    def __init__(
        self,
        access_token: str,
        refresher: Optional["TokenRefresher"] = None,
        config: Optional[ClientConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            access_token: Bearer token for API requests.
            refresher: Optional collaborator whose ``request()`` yields
                ``{"access_token": ...}``. Called on 401 responses.
            config: Client settings. Defaults to ``ClientConfig()``.
            client: Optional externally owned httpx.AsyncClient. When
                omitted, one is created and closed by ``aclose``.
        """
        self._access_token = access_token
        self._refresher = refresher
        self._config = config or ClientConfig()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._config.timeout)

    @property
    def access_token(self) -> str:
        return self._access_token

    @access_token.setter
    def access_token(self, value: str) -> None:
        self._access_token = value

    @property
    def refresher(self) -> Optional["TokenRefresher"]:
        return self._refresher

    @refresher.setter
    def refresher(self, value: Optional["TokenRefresher"]) -> None:
        self._refresher = value

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    # -----------------------------------------------------------------
    # Request executor
    # -----------------------------------------------------------------

    async def execute(
        self,
        request: RequestDescriptor,
        access_token: Optional[str] = None,
    ) -> httpx.Response:
        """
        Issue a single request and return the raw response.

        Args:
            request: The request to issue.
            access_token: Token to send instead of the session's current
                one. The retry path passes the token its refresh obtained.

        Raises:
            SpotifyTransportError: On connection, DNS or timeout failures.
        """
        token = access_token if access_token is not None else self._access_token
        headers = dict(request.headers)
        headers["Authorization"] = f"Bearer {token}"

        logger.debug("%s %s params=%s", request.method, request.path, request.params)
        try:
            response = await self._client.request(
                request.method,
                request.path,
                params=request.params,
                headers=headers,
                content=request.encoded_body(),
                timeout=self._config.timeout,
            )
        except httpx.TransportError as e:
            raise SpotifyTransportError(
                f"{request.method} {request.path} failed: {e}"
            ) from e

        logger.debug("%d %s", response.status_code, request.path)
        return response

    # -----------------------------------------------------------------
    # Refresh coordinator
    # -----------------------------------------------------------------

    async def request(
        self,
        path: str,
        method: str = HTTPMethod.GET,
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Send a request and classify its response.

        On a 401 with a refresher configured, refreshes the token and
        retries exactly once. The retry is classified as-is.

        Returns:
            Parsed JSON body, or ``{"status": <code>}`` for empty bodies.

        Raises:
            SpotifyAPIError: Structured error payload in the response.
            SpotifyHTTPError: Non-2xx response without an error payload.
            SpotifyTransportError: The request could not be sent.
        """
        request = RequestDescriptor(
            path=path,
            method=method,
            body=body,
            headers=dict(headers) if headers is not None else dict(DEFAULT_HEADERS),
            params=_clean_params(params),
        )
        response = await self.execute(request)

        if response.status_code == 401 and self._can_refresh():
            logger.info("401 received, attempting token refresh")
            new_token = await self._refresh_access_token()
            if new_token:
                self._access_token = new_token
                response = await self.execute(request, access_token=new_token)

        return classify_response(response)

    def _can_refresh(self) -> bool:
        return self._refresher is not None and self._config.refresh_on_unauthorized

    async def _refresh_access_token(self) -> Optional[str]:
        """Ask the refresher for a new token; None if it yields none."""
        try:
            result = self._refresher.request()
            if inspect.isawaitable(result):
                result = await result
        except Exception as e:
            logger.warning("Token refresh failed: %s", e)
            return None

        token = result.get("access_token") if isinstance(result, Mapping) else None
        if not token:
            logger.warning("Token refresh returned no access_token")
            return None
        return token


def _clean_params(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Drop unset query parameters and render booleans the way Spotify expects."""
    if not params:
        return None
    cleaned = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        cleaned[key] = value
    return cleaned or None

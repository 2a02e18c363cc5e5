"""Request core shared by the booking API resources.

Every backend call goes through ``BaseApiClient.request`` which:

- looks up the stored bearer token, trading an identity-provider session for
  one when no token is stored and an exchange is configured;
- sends JSON with ``Authorization: Bearer <token>`` when a token is known;
- decodes the JSON body (an empty body decodes to ``{}``);
- clears the token and notifies ``on_session_expired`` when the backend rejects
  the token;
- raises a typed ``BookingApiError`` carrying the backend's ``error`` or
  ``message`` for every non-2xx status.
"""

from __future__ import annotations

import json as _json
import logging
from typing import Any, Callable, Dict, Mapping, Optional

import httpx

from lesage_booking.auth.session_exchange import SessionTokenExchange
from lesage_booking.auth.token_store import MemoryTokenStore, TokenStore
from lesage_booking.core.config import settings

from .errors import (
    BookingApiError,
    InvalidResponseError,
    ServerUnreachableError,
    TokenExpiredError,
    error_for_status,
)
from .url import get_api_base_url

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Server unreachable. Check that the backend is running."


def query_value(value: Any) -> str:
    return str(value).lower() if isinstance(value, bool) else str(value)


def query_params(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Serialize query parameters the way the backend expects them.

    Booleans become ``true``/``false``; ``None`` values are dropped; everything
    else is passed through ``str``.
    """
    out: Dict[str, str] = {}
    for k, v in (params or {}).items():
        if v is None:
            continue
        out[k] = query_value(v)
    return out


def _fallback_parse_message(status_code: int) -> str:
    if status_code == 401:
        return "Not authenticated"
    if status_code == 404:
        return "Not found"
    return "Invalid server response"


def extract_error_message(data: Any, status_code: int) -> str:
    """Pick the user-facing message out of an error body."""
    if isinstance(data, dict):
        for key in ("error", "message"):
            value = data.get(key)
            if value:
                return str(value)
    return f"Server error ({status_code})"


class BaseApiClient:
    """HTTP core for the booking backend.

    Args:
        base_url: Backend base URL; defaults to ``NEXT_PUBLIC_API_URL``.
        token_store: Where the bearer token lives; defaults to a ``MemoryTokenStore``.
        token_exchange: Optional session exchange tried when no token is stored.
        on_session_expired: Called after an expired token has been cleared,
            typically to route the user back to the login screen.
        timeout: Default HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.Client``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token_store: Optional[TokenStore] = None,
        token_exchange: Optional[SessionTokenExchange] = None,
        on_session_expired: Optional[Callable[[], None]] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = get_api_base_url(base_url)
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self._token_exchange = token_exchange
        self._on_session_expired = on_session_expired
        self._client = client or httpx.Client(
            timeout=timeout if timeout is not None else settings.http_timeout, follow_redirects=True
        )
        self._logger = logger

    # ------------------------------------------------------------------
    # Token helpers
    # ------------------------------------------------------------------

    @property
    def token(self) -> Optional[str]:
        return self.token_store.get()

    def _resolve_token(self) -> Optional[str]:
        token = self.token_store.get()
        if token or self._token_exchange is None:
            return token
        exchanged = self._token_exchange.exchange()
        if exchanged:
            self.token_store.set(exchanged)
        return exchanged

    def _headers(self, token: Optional[str], extra: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if extra:
            headers.update(extra)
        return headers

    # ------------------------------------------------------------------
    # Request core
    # ------------------------------------------------------------------

    def request(
        self,
        method: str,
        endpoint: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Send a request to ``<base_url><endpoint>`` and return the decoded body.

        Raises:
            TokenExpiredError: 401 caused by a rejected token (the token is cleared).
            NotAuthenticatedError: Any other 401.
            NotFoundError: 404.
            BookingApiError: Any other non-2xx status.
            InvalidResponseError: The body is not JSON.
            ServerUnreachableError: The backend could not be contacted.
        """
        token = self._resolve_token()
        url = f"{self.base_url}{endpoint}"
        qp = query_params(params)
        self._logger.debug("API Call: %s %s params=%s", method, url, qp or None)
        self._logger.debug("  Token: %s", "present" if token else "absent")

        try:
            r = self._client.request(
                method,
                url,
                headers=self._headers(token, headers),
                params=qp or None,
                content=_json.dumps(json) if json is not None else None,
            )
        except httpx.TransportError as e:
            self._logger.error(
                "Network error: %s",
                {"message": "Unable to contact server", "url": url, "suggestion": f"Check the backend at {self.base_url}"},
            )
            raise ServerUnreachableError(UNREACHABLE_MESSAGE, details=str(e)) from e

        self._logger.debug("Response: %s %s", r.status_code, r.reason_phrase)
        data = self._decode(r)

        if r.status_code == 401 and isinstance(data, dict) and "Token" in str(data.get("error") or ""):
            self._logger.warning("Token expired - signing out")
            self.token_store.remove()
            if self._on_session_expired is not None:
                self._on_session_expired()
            raise TokenExpiredError(str(data["error"]), status_code=401, details=data)

        if not r.is_success:
            message = extract_error_message(data, r.status_code)
            self._logger.error(
                "API error: %s",
                {"status": r.status_code, "endpoint": endpoint, "error": message, "details": data},
            )
            raise error_for_status(r.status_code, message, data)

        return data

    def _decode(self, r: httpx.Response) -> Any:
        text = r.text
        if not text:
            return {}
        try:
            data = _json.loads(text)
        except ValueError as e:
            self._logger.error("JSON parse error for %s: %s", r.request.url, e)
            raise InvalidResponseError(
                _fallback_parse_message(r.status_code), status_code=r.status_code, details=text
            ) from e
        self._logger.debug("Data: %s", data)
        return data

    def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("GET", endpoint, params=params)

    def post(self, endpoint: str, json: Any = None, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("POST", endpoint, json=json, params=params)

    def put(self, endpoint: str, json: Any = None) -> Any:
        return self.request("PUT", endpoint, json=json)

    def delete(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self.request("DELETE", endpoint, params=params)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BaseApiClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = [
    "BaseApiClient",
    "BookingApiError",
    "extract_error_message",
    "query_params",
]

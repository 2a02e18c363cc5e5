"""Session to backend-token exchange.

Users who signed in through the identity provider (e.g. Google) hold a session
cookie on the web application but no backend JWT. The web application exposes
``GET /api/backend-token`` which trades the session for a JWT. The exchange is
best effort: any failure just means the request proceeds unauthenticated.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

import httpx

BACKEND_TOKEN_PATH = "/api/backend-token"


class SessionTokenExchange:
    """Trade an identity-provider session cookie for a backend JWT.

    Args:
        app_origin: Origin of the web application, e.g. ``https://lesagedev.com``.
        client: Optional preconfigured ``httpx.Client``.
        cookies: Session cookies to send; merged into the client's cookie jar.
        timeout: Default HTTP timeout for the internal client.
    """

    def __init__(
        self,
        app_origin: str,
        *,
        client: Optional[httpx.Client] = None,
        cookies: Optional[Mapping[str, str]] = None,
        timeout: float = 5.0,
    ) -> None:
        self.app_origin = app_origin.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)
        if cookies:
            self._client.cookies.update(dict(cookies))
        self._logger = logging.getLogger(__name__)

    def exchange(self) -> Optional[str]:
        """Return a backend token for the current session, or ``None``."""
        url = f"{self.app_origin}{BACKEND_TOKEN_PATH}"
        try:
            r = self._client.get(url)
            data = r.json()
        except (httpx.HTTPError, ValueError) as e:
            self._logger.debug("SessionTokenExchange.exchange: %s failed: %s", url, e)
            return None
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            self._logger.debug("SessionTokenExchange.exchange: no token for current session")
            return None
        return str(token)

"""Authentication endpoints (``/auth/*``)."""

from __future__ import annotations

import logging
from typing import Any, Dict

from ..errors import BookingApiError
from ..models import (
    AuthResponse,
    AuthStatus,
    ForgotPasswordRequest,
    Payload,
    ResetPasswordRequest,
    as_body,
)
from ._base import Resource

logger = logging.getLogger(__name__)


class AuthResource(Resource):
    """Login, registration and session management against the backend JWT API.

    Tokens returned by ``login``, ``register`` and ``refresh_token`` are written
    to the client's token store.
    """

    def _store_token(self, data: Any) -> AuthResponse:
        resp = AuthResponse.model_validate(data if isinstance(data, dict) else {})
        if resp.token:
            self._api.token_store.set(resp.token)
        return resp

    def login(self, credentials: Payload) -> AuthResponse:
        """``POST /auth/login``"""
        logger.info("Signing in...")
        resp = self._store_token(self._api.post("/auth/login", as_body(credentials)))
        if resp.token:
            logger.info("Signed in")
        return resp

    def register(self, user: Payload) -> AuthResponse:
        """``POST /auth/register``"""
        logger.info("Registering...")
        resp = self._store_token(self._api.post("/auth/register", as_body(user)))
        if resp.token:
            logger.info("Registered")
        return resp

    def logout(self) -> None:
        """``POST /auth/logout``; the local token is cleared even if the call fails."""
        logger.info("Signing out...")
        try:
            self._api.post("/auth/logout")
        except BookingApiError as e:
            logger.error("Logout error: %s", e)
        finally:
            self._api.token_store.remove()
            logger.info("Signed out")

    def check_auth(self) -> AuthStatus:
        """Return whether the stored token is still accepted by ``GET /auth/me``.

        Never raises; a rejected token is cleared.
        """
        if not self._api.token_store.get():
            logger.debug("No token - not authenticated")
            return AuthStatus(authenticated=False, user=None)
        try:
            data = self._api.get("/auth/me")
        except BookingApiError as e:
            logger.debug("check_auth failed: %s", e)
            self._api.token_store.remove()
            return AuthStatus(authenticated=False, user=None)
        user = data.get("user") if isinstance(data, dict) else None
        logger.debug("Authenticated: %s", (user or {}).get("email"))
        return AuthStatus(authenticated=True, user=user)

    def refresh_token(self) -> AuthResponse:
        """``POST /auth/refresh``; on failure the token is cleared and the error re-raised."""
        try:
            return self._store_token(self._api.post("/auth/refresh"))
        except BookingApiError:
            self._api.token_store.remove()
            raise

    def me(self) -> Dict[str, Any]:
        """``GET /auth/me``"""
        return self._api.get("/auth/me")

    def forgot_password(self, email: str) -> Dict[str, Any]:
        """``POST /auth/forgot-password``"""
        return self._api.post("/auth/forgot-password", ForgotPasswordRequest(email=email).to_body())

    def reset_password(self, token: str, password: str) -> Dict[str, Any]:
        """``POST /auth/reset-password``"""
        return self._api.post(
            "/auth/reset-password", ResetPasswordRequest(token=token, new_password=password).to_body()
        )

"""Login and password-recovery flows.

Each flow validates form input locally, calls the backend through a
``BookingApiClient`` and turns failures into a ``FlowError`` whose text is
ready to show to the user.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Dict, Optional

from pydantic import BaseModel

from lesage_booking.api.errors import BookingApiError, InvalidResponseError, ServerUnreachableError

from .errors import FlowError, ValidationError

if TYPE_CHECKING:
    from lesage_booking.api.client import BookingApiClient

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
RESET_MIN_PASSWORD_LENGTH = 6
RESET_SUCCESS_REDIRECT = "/login?message=password-reset-success"

FORGOT_SENT_MESSAGE = (
    "If an account exists with this email, you will receive a reset link in a few moments."
)


class FlowResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    redirect_to: Optional[str] = None
    user: Optional[Dict[str, Any]] = None
    token_stored: bool = False


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def _flow_message(exc: BookingApiError, default: str) -> str:
    """The backend's ``error`` field, or the transport message, or ``default``."""
    if isinstance(exc.details, dict) and exc.details.get("error"):
        return str(exc.details["error"])
    if isinstance(exc, (ServerUnreachableError, InvalidResponseError)):
        return exc.message
    return default


class ForgotPasswordFlow:
    """Request a password-reset email."""

    def __init__(self, client: "BookingApiClient") -> None:
        self._client = client

    def submit(self, email: str) -> FlowResult:
        email = (email or "").strip()
        if not is_valid_email(email):
            raise ValidationError("Invalid email format")
        try:
            self._client.auth.forgot_password(email)
        except BookingApiError as e:
            logger.warning("Forgot password request failed: %s", e)
            raise FlowError(_flow_message(e, "Error while sending")) from e
        # Same answer whether or not the account exists
        return FlowResult(message=FORGOT_SENT_MESSAGE)


class ResetPasswordFlow:
    """Set a new password using the token from the reset email."""

    def __init__(self, client: "BookingApiClient", *, min_length: int = RESET_MIN_PASSWORD_LENGTH) -> None:
        self._client = client
        self.min_length = min_length

    def validate(self, token: Optional[str], password: str, confirm_password: str) -> None:
        if not token:
            raise ValidationError("Missing token. Please use the link received by email.")
        if len(password or "") < self.min_length:
            raise ValidationError(f"Password must be at least {self.min_length} characters")
        if password != confirm_password:
            raise ValidationError("Passwords do not match")

    def submit(self, token: Optional[str], password: str, confirm_password: str) -> FlowResult:
        self.validate(token, password, confirm_password)
        try:
            self._client.auth.reset_password(str(token), password)
        except BookingApiError as e:
            logger.warning("Password reset failed: %s", e)
            raise FlowError(_flow_message(e, "Error while resetting")) from e
        return FlowResult(message="Password reset", redirect_to=RESET_SUCCESS_REDIRECT)


class LoginFlow:
    """Email/password sign-in against the backend JWT API."""

    def __init__(self, client: "BookingApiClient") -> None:
        self._client = client

    def submit(self, email: str, password: str) -> FlowResult:
        email = (email or "").strip()
        if not is_valid_email(email):
            raise ValidationError("Invalid email format")
        if not password:
            raise ValidationError("Password is required")
        try:
            resp = self._client.auth.login({"email": email, "password": password})
        except BookingApiError as e:
            raise FlowError(e.message) from e
        if not resp.token:
            logger.info("Login answered without a token: %s", resp.message)
            return FlowResult(message=resp.message, user=resp.user, token_stored=False)
        return FlowResult(message="Signed in", user=resp.user, token_stored=True)

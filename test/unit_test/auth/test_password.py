from __future__ import annotations

import httpx
import pytest

from lesage_booking.api.client import BookingApiClient
from lesage_booking.auth.errors import FlowError, ValidationError
from lesage_booking.auth.password import (
    FORGOT_SENT_MESSAGE,
    RESET_SUCCESS_REDIRECT,
    ForgotPasswordFlow,
    LoginFlow,
    ResetPasswordFlow,
    is_valid_email,
)
from lesage_booking.auth.token_store import MemoryTokenStore


def _client(handler) -> BookingApiClient:
    return BookingApiClient(
        "http://mock", token_store=MemoryTokenStore(), client=httpx.Client(transport=httpx.MockTransport(handler))
    )


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("refused", request=request)


@pytest.mark.parametrize(
    "email,ok",
    [("a@b.co", True), ("guest@lesagedev.com", True), ("a@b", False), ("a b@c.de", False), ("", False)],
)
def test_is_valid_email(email: str, ok: bool) -> None:
    assert is_valid_email(email) is ok


class TestForgotPassword:
    def test_success_is_neutral(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.content)
            return httpx.Response(200, json={"message": "ok"})

        result = ForgotPasswordFlow(_client(handler)).submit("  a@b.co ")
        assert result.success is True
        assert result.message == FORGOT_SENT_MESSAGE
        assert seen == [b'{"email": "a@b.co"}']

    def test_invalid_email_does_not_call_backend(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("backend must not be called")

        with pytest.raises(ValidationError) as ei:
            ForgotPasswordFlow(_client(handler)).submit("not-an-email")
        assert str(ei.value) == "Invalid email format"

    def test_backend_error_message_is_used(self) -> None:
        flow = ForgotPasswordFlow(_client(lambda r: httpx.Response(429, json={"error": "Too many requests"})))
        with pytest.raises(FlowError) as ei:
            flow.submit("a@b.co")
        assert str(ei.value) == "Too many requests"

    def test_backend_error_without_error_field_uses_default(self) -> None:
        flow = ForgotPasswordFlow(_client(lambda r: httpx.Response(500, json={"message": "crash"})))
        with pytest.raises(FlowError) as ei:
            flow.submit("a@b.co")
        assert str(ei.value) == "Error while sending"

    def test_unreachable_backend(self) -> None:
        with pytest.raises(FlowError) as ei:
            ForgotPasswordFlow(_client(_unreachable)).submit("a@b.co")
        assert "Server unreachable" in str(ei.value)


class TestResetPassword:
    @pytest.mark.parametrize(
        "token,password,confirm,message",
        [
            (None, "secret1", "secret1", "Missing token. Please use the link received by email."),
            ("", "secret1", "secret1", "Missing token. Please use the link received by email."),
            ("tok", "abc", "abc", "Password must be at least 6 characters"),
            ("tok", "secret1", "secret2", "Passwords do not match"),
        ],
    )
    def test_validation(self, token, password, confirm, message) -> None:
        flow = ResetPasswordFlow(_client(lambda r: httpx.Response(200, json={})))
        with pytest.raises(ValidationError) as ei:
            flow.submit(token, password, confirm)
        assert str(ei.value) == message

    def test_custom_min_length(self) -> None:
        flow = ResetPasswordFlow(_client(lambda r: httpx.Response(200, json={})), min_length=8)
        with pytest.raises(ValidationError) as ei:
            flow.validate("tok", "secret1", "secret1")
        assert str(ei.value) == "Password must be at least 8 characters"

    def test_success_redirects_to_login(self) -> None:
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.url.path, request.content))
            return httpx.Response(200, json={"message": "ok"})

        result = ResetPasswordFlow(_client(handler)).submit("tok", "secret1", "secret1")

        assert result.redirect_to == RESET_SUCCESS_REDIRECT
        assert seen == [("/auth/reset-password", b'{"token": "tok", "newPassword": "secret1"}')]

    def test_backend_rejects_token(self) -> None:
        flow = ResetPasswordFlow(_client(lambda r: httpx.Response(400, json={"error": "Invalid or expired token"})))
        with pytest.raises(FlowError) as ei:
            flow.submit("tok", "secret1", "secret1")
        assert str(ei.value) == "Invalid or expired token"
        assert ei.value.__cause__.status_code == 400

    def test_backend_failure_default_message(self) -> None:
        flow = ResetPasswordFlow(_client(lambda r: httpx.Response(500, json={})))
        with pytest.raises(FlowError) as ei:
            flow.submit("tok", "secret1", "secret1")
        assert str(ei.value) == "Error while resetting"


class TestLogin:
    def test_login_stores_token(self) -> None:
        client = _client(lambda r: httpx.Response(200, json={"token": "jwt", "user": {"email": "a@b.co"}}))
        result = LoginFlow(client).submit("a@b.co", "secret1")
        assert result.user == {"email": "a@b.co"}
        assert result.token_stored is True
        assert client.token == "jwt"

    def test_login_requires_password(self) -> None:
        with pytest.raises(ValidationError):
            LoginFlow(_client(lambda r: httpx.Response(200, json={}))).submit("a@b.co", "")

    def test_login_rejected(self) -> None:
        client = _client(lambda r: httpx.Response(400, json={"error": "Invalid credentials"}))
        with pytest.raises(FlowError) as ei:
            LoginFlow(client).submit("a@b.co", "wrong")
        assert str(ei.value) == "Invalid credentials"

    def test_login_without_token_is_not_an_error(self) -> None:
        client = _client(
            lambda r: httpx.Response(200, json={"message": "Verify your email first", "user": {"email": "a@b.co"}})
        )
        result = LoginFlow(client).submit("a@b.co", "secret1")
        assert result.success is True
        assert result.token_stored is False
        assert result.message == "Verify your email first"
        assert result.user == {"email": "a@b.co"}
        assert client.token is None

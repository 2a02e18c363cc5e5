import json

import httpx
import pytest
from httpx import AsyncClient

from lesage_booking.auth.password import FORGOT_SENT_MESSAGE, RESET_SUCCESS_REDIRECT

pytestmark = pytest.mark.asyncio

FORGOT = "http://localhost/api/v1/auth/forgot-password"
RESET = "http://localhost/api/v1/auth/reset-password"


class TestForgotPassword:
    async def test_success(self, client: AsyncClient, backend_stub):
        backend_stub.responses["/auth/forgot-password"] = httpx.Response(200, json={"message": "queued"})

        response = await client.post(FORGOT, json={"email": "guest@lesagedev.com"})

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == FORGOT_SENT_MESSAGE
        assert backend_stub.requests[-1].url.path == "/auth/forgot-password"

    async def test_invalid_email_is_400_without_backend_call(self, client: AsyncClient, backend_stub):
        response = await client.post(FORGOT, json={"email": "nope"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid email format"}
        assert backend_stub.requests == []

    async def test_backend_refusal_keeps_status(self, client: AsyncClient, backend_stub):
        backend_stub.responses["/auth/forgot-password"] = httpx.Response(
            429, json={"error": "Too many requests"}
        )
        response = await client.post(FORGOT, json={"email": "guest@lesagedev.com"})
        assert response.status_code == 429
        assert response.json() == {"error": "Too many requests"}

    async def test_backend_failure_is_502(self, client: AsyncClient, backend_stub):
        backend_stub.responses["/auth/forgot-password"] = httpx.Response(500, json={"message": "db down"})
        response = await client.post(FORGOT, json={"email": "guest@lesagedev.com"})
        assert response.status_code == 502
        assert response.json() == {"error": "Error while sending"}

    async def test_unreachable_backend_is_502(self, client: AsyncClient, backend_stub):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        backend_stub.responses["/auth/forgot-password"] = refuse
        response = await client.post(FORGOT, json={"email": "guest@lesagedev.com"})
        assert response.status_code == 502
        assert "Server unreachable" in response.json()["error"]


class TestResetPassword:
    async def test_success(self, client: AsyncClient, backend_stub):
        backend_stub.responses["/auth/reset-password"] = httpx.Response(200, json={"message": "ok"})

        response = await client.post(
            RESET, json={"token": "tok", "password": "secret1", "confirmPassword": "secret1"}
        )

        assert response.status_code == 200
        assert response.json()["redirect_to"] == RESET_SUCCESS_REDIRECT
        assert json.loads(backend_stub.requests[-1].content) == {"token": "tok", "newPassword": "secret1"}

    async def test_snake_case_confirm_is_accepted(self, client: AsyncClient, backend_stub):
        backend_stub.responses["/auth/reset-password"] = httpx.Response(200, json={})
        response = await client.post(
            RESET, json={"token": "tok", "password": "secret1", "confirm_password": "secret1"}
        )
        assert response.status_code == 200

    @pytest.mark.parametrize(
        "body,error",
        [
            (
                {"password": "secret1", "confirmPassword": "secret1"},
                "Missing token. Please use the link received by email.",
            ),
            ({"token": "tok", "password": "abc", "confirmPassword": "abc"}, "Password must be at least 6 characters"),
            ({"token": "tok", "password": "secret1", "confirmPassword": "secret2"}, "Passwords do not match"),
        ],
    )
    async def test_validation_errors(self, client: AsyncClient, backend_stub, body, error):
        response = await client.post(RESET, json=body)
        assert response.status_code == 400
        assert response.json() == {"error": error}
        assert backend_stub.requests == []

    async def test_expired_token(self, client: AsyncClient, backend_stub):
        backend_stub.responses["/auth/reset-password"] = httpx.Response(
            400, json={"error": "Invalid or expired token"}
        )
        response = await client.post(
            RESET, json={"token": "old", "password": "secret1", "confirmPassword": "secret1"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid or expired token"}

    async def test_missing_fields_answer_400(self, client: AsyncClient, backend_stub):
        response = await client.post(RESET, json={"token": "tok"})
        assert response.status_code == 400
        assert response.json() == {"error": "password: Field required"}
        assert backend_stub.requests == []


async def test_public_auth_config(client: AsyncClient):
    response = await client.get("http://localhost/api/v1/auth/config")

    assert response.status_code == 200
    data = response.json()
    assert data["app_name"] == "LE SAGE DEV"
    assert data["social_providers"] == ["google"]
    assert data["email_and_password"]["min_password_length"] == 8
    assert "test-secret" not in response.text
    assert "gsecret" not in response.text

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from lesage_booking.api.client import BookingApiClient
from lesage_booking.auth.config import build_auth_config
from lesage_booking.auth.token_store import MemoryTokenStore
from lesage_booking.core.config import AuthEnvConfig


class BackendStub:
    """Canned backend answers keyed by path, with the requests it received."""

    def __init__(self) -> None:
        self.responses: dict = {}
        self.requests: list = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        resp = self.responses.get(request.url.path)
        if resp is None:
            return httpx.Response(404, json={"error": "not found"})
        if callable(resp):
            return resp(request)
        return resp


@pytest.fixture
def backend_stub() -> BackendStub:
    return BackendStub()


@pytest_asyncio.fixture(name="client")
async def client_fixture(backend_stub: BackendStub) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client with the backend and auth config overridden."""
    from lesage_booking.server.main import app
    from lesage_booking.server.services.deps import get_auth_config, get_booking_client

    booking = BookingApiClient(
        "http://mock",
        token_store=MemoryTokenStore(),
        client=httpx.Client(transport=httpx.MockTransport(backend_stub.handler)),
    )
    auth_config = build_auth_config(
        AuthEnvConfig(secret="test-secret", google_client_id="gid", google_client_secret="gsecret")
    )

    app.dependency_overrides[get_booking_client] = lambda: booking
    app.dependency_overrides[get_auth_config] = lambda: auth_config

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()
    booking.close()

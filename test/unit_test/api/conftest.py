from __future__ import annotations

import json as _json
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest

from lesage_booking.api.client import BookingApiClient
from lesage_booking.auth.token_store import MemoryTokenStore

Handler = Callable[[httpx.Request], httpx.Response]


class RecordingBackend:
    """Route table for ``httpx.MockTransport`` that records every request."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Any] = {}
        self.requests: List[httpx.Request] = []

    def on(self, method: str, path: str, response: Any = None, status: int = 200) -> None:
        if isinstance(response, httpx.Response) or callable(response):
            self.routes[(method, path)] = response
        else:
            self.routes[(method, path)] = (status, {} if response is None else response)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(route, httpx.Response):
            return route
        if callable(route):
            return route(request)
        status, body = route
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Optional[Any]:
        content = self.last.content
        return _json.loads(content.decode("utf-8")) if content else None


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def http_client(backend: RecordingBackend) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(backend.handler), base_url="http://mock")


@pytest.fixture
def store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def api(http_client: httpx.Client, store: MemoryTokenStore) -> BookingApiClient:
    return BookingApiClient("http://mock", token_store=store, client=http_client)

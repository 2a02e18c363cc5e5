"""Hotel API client (rooms, availability, amenities, dining, spa, offers).

The hotel endpoints live under ``<api_url>/hotel`` and are scoped by
``hotel_id``. Every read carries a ``hotel_id`` query parameter (the configured
default hotel when none is given) and is sent without credentials, except the
guest's own reservations. Writes carry the stored bearer token; reservation
creation adds the default ``hotel_id`` to the body when missing.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

import httpx

from lesage_booking.auth.token_store import MemoryTokenStore, TokenStore
from lesage_booking.core.config import settings

from .base import query_value
from .errors import InvalidResponseError, ServerUnreachableError, error_for_status
from .models import AvailabilityQuery, Payload, as_body
from .url import get_api_base_url


def hotel_query(params: Optional[Mapping[str, Any]], default_hotel_id: str) -> List[Tuple[str, str]]:
    """Build hotel query parameters.

    ``hotel_id`` always comes first and falls back to ``default_hotel_id``; other
    parameters are kept unless they are ``None`` or an empty string, and
    booleans are sent as ``true``/``false``.
    """
    params = params or {}
    query: List[Tuple[str, str]] = [("hotel_id", str(params.get("hotel_id") or default_hotel_id))]
    for k, v in params.items():
        if k == "hotel_id" or v is None or v == "":
            continue
        query.append((k, query_value(v)))
    return query


class HotelApiClient:
    """Thin HTTP client for the ``/hotel`` endpoints.

    Args:
        base_url: Backend base URL; defaults to ``NEXT_PUBLIC_API_URL``.
        hotel_id: Default hotel; defaults to ``NEXT_PUBLIC_HOTEL_ID``.
        token_store: Source of the bearer token for writes.
        timeout: Default HTTP timeout for the internal client.
        client: Optional preconfigured ``httpx.Client``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        hotel_id: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.base_url = f"{get_api_base_url(base_url)}/hotel"
        self.hotel_id = hotel_id or settings.hotel_id
        self.token_store = token_store if token_store is not None else MemoryTokenStore()
        self._client = client or httpx.Client(
            timeout=timeout if timeout is not None else settings.http_timeout, follow_redirects=True
        )
        self._logger = logging.getLogger(__name__)

    def _auth_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Content-Type": "application/json"}
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.base_url}{path}"
        self._logger.debug("HotelApiClient: %s %s", method, url)
        try:
            r = self._client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            raise ServerUnreachableError("Server unreachable. Check that the backend is running.", details=str(e)) from e
        if not r.is_success:
            try:
                data = r.json()
            except ValueError:
                data = {}
            message = (data.get("error") if isinstance(data, dict) else None) or r.reason_phrase
            raise error_for_status(r.status_code, str(message), data)
        try:
            return r.json()
        except ValueError as e:
            raise InvalidResponseError("Invalid server response", status_code=r.status_code, details=r.text) from e

    def _get(self, path: str, params: Optional[Mapping[str, Any]] = None, *, auth: bool = False) -> Any:
        headers = self._auth_headers() if auth else None
        return self._send("GET", path, params=hotel_query(params, self.hotel_id), headers=headers)

    def _post(self, path: str, body: Optional[Payload] = None) -> Any:
        data = as_body(body)
        data["hotel_id"] = data.get("hotel_id") or self.hotel_id
        return self._send("POST", path, json=data, headers=self._auth_headers())

    def _put(self, path: str, body: Optional[Payload] = None) -> Any:
        return self._send("PUT", path, json=as_body(body), headers=self._auth_headers())

    # ------------------------------------------------------------------
    # Public reads
    # ------------------------------------------------------------------

    def get_hotel(self, hotel_id: Optional[str] = None) -> Any:
        return self._get("", {"hotel_id": hotel_id})

    def rooms(self, hotel_id: Optional[str] = None) -> Any:
        return self._get("/rooms", {"hotel_id": hotel_id})

    def room(self, room_id: Any) -> Any:
        return self._get(f"/rooms/{room_id}")

    def availability(
        self,
        check_in: str,
        check_out: str,
        room_type_id: Any = None,
        hotel_id: Optional[str] = None,
    ) -> Any:
        """``GET /hotel/rooms/availability`` for a stay between two ISO dates."""
        q = AvailabilityQuery(check_in=check_in, check_out=check_out, room_type_id=room_type_id)
        return self._get("/rooms/availability", {**q.model_dump(), "hotel_id": hotel_id})

    def amenities(self, amenity_type: Optional[str] = None, hotel_id: Optional[str] = None) -> Any:
        return self._get("/amenities", {"type": amenity_type, "hotel_id": hotel_id})

    def dining(self, hotel_id: Optional[str] = None) -> Any:
        return self._get("/dining", {"hotel_id": hotel_id})

    def wellness(self, hotel_id: Optional[str] = None) -> Any:
        return self._get("/wellness", {"hotel_id": hotel_id})

    def gallery(self, category: Optional[str] = None, hotel_id: Optional[str] = None) -> Any:
        return self._get("/gallery", {"category": category, "hotel_id": hotel_id})

    def offers(self, hotel_id: Optional[str] = None) -> Any:
        return self._get("/offers", {"hotel_id": hotel_id})

    # ------------------------------------------------------------------
    # Reservations
    # ------------------------------------------------------------------

    def create_reservation(self, data: Payload) -> Any:
        return self._post("/reservations", data)

    def my_reservations(self) -> Any:
        return self._get("/reservations/my", auth=True)

    def reservation(self, reservation_id: Any) -> Any:
        return self._get(f"/reservations/{reservation_id}", auth=True)

    def cancel_reservation(self, reservation_id: Any) -> Any:
        return self._put(f"/reservations/{reservation_id}/cancel")

    def close(self) -> None:
        self._client.close()

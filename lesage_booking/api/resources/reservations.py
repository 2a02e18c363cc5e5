"""Customer reservations (``/reservations``)."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..errors import BookingApiError
from ..models import Payload, as_body
from ._base import Resource

logger = logging.getLogger(__name__)


class ReservationsResource(Resource):
    """Create, inspect and cancel the current user's reservations.

    ``my`` and ``my_projects`` are used to render dashboards and degrade to an
    empty list instead of raising. The ``*_raw`` variants return the backend
    body untouched.
    """

    def create(self, data: Payload) -> Any:
        try:
            return self._api.post("/reservations", as_body(data))
        except BookingApiError as e:
            logger.error("Reservation creation failed: %s", e)
            raise

    def my(self) -> List[Dict[str, Any]]:
        try:
            data = self._api.get("/reservations/my")
        except BookingApiError as e:
            logger.error("my reservations failed: %s", e)
            return []
        return (data.get("reservations") if isinstance(data, dict) else None) or []

    def get(self, reservation_id: Any) -> Any:
        data = self._api.get(f"/reservations/{reservation_id}")
        return data.get("reservation") if isinstance(data, dict) else None

    def cancel(self, reservation_id: Any) -> Any:
        return self._api.put(f"/reservations/{reservation_id}/cancel")

    def check_availability(self, data: Payload) -> Any:
        return self._api.post("/reservations/check-availability", as_body(data))

    def list_raw(self) -> Any:
        return self._api.get("/reservations/my")

    def get_raw(self, reservation_id: Any) -> Any:
        return self._api.get(f"/reservations/{reservation_id}")

    def update(self, reservation_id: Any, data: Payload) -> Any:
        return self._api.put(f"/reservations/{reservation_id}", as_body(data))

    def delete(self, reservation_id: Any) -> Any:
        return self._api.delete(f"/reservations/{reservation_id}")

    def my_projects(self) -> Any:
        """``GET /dashboard/projects``; the ``projects`` list, the bare body, or ``[]``."""
        try:
            data = self._api.get("/dashboard/projects")
        except BookingApiError:
            return []
        if isinstance(data, dict) and data.get("projects"):
            return data["projects"]
        return data or []

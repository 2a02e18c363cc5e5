"""Current-user endpoints: profile, notifications and site settings."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models import Payload, SettingCreate, as_body
from ._base import Resource


class UsersResource(Resource):
    def profile(self) -> Any:
        return self._api.get("/users/profile")

    def update_profile(self, data: Payload) -> Any:
        return self._api.put("/users/profile", as_body(data))

    def change_password(self, data: Payload) -> Any:
        return self._api.put("/users/change-password", as_body(data))

    def delete_account(self) -> Any:
        return self._api.delete("/users/profile")

    def stats(self) -> Any:
        return self._api.get("/users/stats")

    def messages(self) -> Any:
        return self._api.get("/users/messages")


class NotificationsResource(Resource):
    def list(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._api.get("/users/notifications", params)

    def mark_read(self, notification_id: Any) -> Any:
        return self._api.put(f"/users/notifications/{notification_id}/read")

    def mark_all_read(self) -> Any:
        return self._api.put("/users/notifications/read-all")

    def delete(self, notification_id: Any) -> Any:
        return self._api.delete(f"/users/notifications/{notification_id}")


class SettingsResource(Resource):
    """Key/value site settings (``/settings``)."""

    def list(self) -> Any:
        return self._api.get("/settings")

    def get(self, key: str) -> Any:
        return self._api.get(f"/settings/{key}")

    def update(self, key: str, value: Any) -> Any:
        return self._api.put(f"/settings/{key}", {"value": value})

    def create(self, key: str, value: Any, type: Optional[str] = None, description: Optional[str] = None) -> Any:
        body = SettingCreate(key=key, value=value, type=type, description=description)
        return self._api.post("/settings", body.model_dump(mode="json", exclude_none=True))

    def delete(self, key: str) -> Any:
        return self._api.delete(f"/settings/{key}")

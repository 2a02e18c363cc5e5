"""Booking API DTO models

Overview
--------
Pydantic DTOs for the request/response payloads whose shape the client relies
on. Most backend resources (dishes, menus, projects, ...) are passed through as
plain dicts; only the payloads the client builds itself or unwraps are modeled
here.

Design guidelines
-----------------
- Keep field names and aliases consistent with the wire schema. The backend
  mixes camelCase (``dishId``, ``rewardId``, ``isFavorite``) and snake_case
  (``message_type``, ``reply_text``), so aliases are explicit per field.
- Response DTOs are permissive (``extra="allow"``) so new backend fields do not
  break older clients.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class BaseSchema(BaseModel):
    """Shared base for the booking DTOs.

    - Enables populate_by_name for using either the Python or the wire name
    - Keeps unknown fields so callers can forward extra backend attributes
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


Payload = Union[BaseSchema, Mapping[str, Any]]


def as_body(payload: Optional[Payload]) -> Dict[str, Any]:
    """Turn a DTO or mapping into a JSON-ready dict."""
    if payload is None:
        return {}
    if isinstance(payload, BaseSchema):
        return payload.to_body()
    return dict(payload)


# -----------------------------
# Auth
# -----------------------------


class LoginCredentials(BaseSchema):
    email: str
    password: str


class RegisterPayload(BaseSchema):
    email: str
    password: str
    name: Optional[str] = None
    phone: Optional[str] = None


class AuthResponse(BaseSchema):
    """Body returned by ``/auth/login``, ``/auth/register`` and ``/auth/refresh``."""

    token: Optional[str] = None
    user: Optional[Dict[str, Any]] = None
    message: Optional[str] = None


class AuthStatus(BaseSchema):
    """Outcome of ``check_auth``; never raises."""

    authenticated: bool = False
    user: Optional[Dict[str, Any]] = None


class ForgotPasswordRequest(BaseSchema):
    email: str


class ResetPasswordRequest(BaseSchema):
    token: str
    new_password: str = Field(..., alias="newPassword")


class ChangePasswordRequest(BaseSchema):
    current_password: str = Field(..., alias="currentPassword")
    new_password: str = Field(..., alias="newPassword")


# -----------------------------
# Catalogue / engagement
# -----------------------------


class FavoritesList(BaseSchema):
    """Favorites normalized from either a bare list or ``{"favorites": [...]}``."""

    favorites: List[Dict[str, Any]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"favorites": data}
        if isinstance(data, dict) and not data.get("favorites"):
            return {**data, "favorites": []}
        return data


class ReviewCreate(BaseSchema):
    dish_id: Union[int, str] = Field(..., alias="dishId")
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = None


class SettingCreate(BaseSchema):
    key: str
    value: Any = None
    type: Optional[str] = None
    description: Optional[str] = None


class NewsletterSubscription(BaseSchema):
    email: str
    name: Optional[str] = None


# -----------------------------
# Messaging
# -----------------------------


class ChatMessageCreate(BaseSchema):
    message: str
    message_type: str = "text"
    file_url: Optional[str] = None
    file_name: Optional[str] = None


class AdminMessageCreate(BaseSchema):
    message: str
    title: Optional[str] = None


class AdminChatConversationCreate(BaseSchema):
    user_id: Union[int, str]
    subject: str = "Discussion with the team"


class ProjectComment(BaseSchema):
    comment: str
    is_internal: bool = False


# -----------------------------
# Project files
# -----------------------------


class ProjectFile(BaseSchema):
    id: Union[int, str]
    file_url: Optional[str] = None
    file_name: Optional[str] = None


# -----------------------------
# Hotel
# -----------------------------


class AvailabilityQuery(BaseSchema):
    check_in: str
    check_out: str
    room_type_id: Optional[Union[int, str]] = None

"""Client-side messaging: notifications thread with the team and live chat."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models import ChatMessageCreate, Payload, as_body
from ._base import Resource


class MessagesResource(Resource):
    def conversation(self) -> Any:
        return self._api.get("/messages/conversation")

    def send_to_admin(self, message: str) -> Any:
        return self._api.post("/messages/send", {"message": message})

    def mark_read(self, conversation_id: Any) -> Any:
        return self._api.put(f"/messages/{conversation_id}/mark-read")


class ChatResource(Resource):
    def conversations(self) -> Any:
        return self._api.get("/chat/conversations")

    def create_conversation(self, data: Payload) -> Any:
        return self._api.post("/chat/conversations", as_body(data))

    def messages(self, conversation_id: Any, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._api.get(f"/chat/conversations/{conversation_id}/messages", params)

    def send(
        self,
        conversation_id: Any,
        message: str,
        message_type: str = "text",
        file_url: Optional[str] = None,
        file_name: Optional[str] = None,
    ) -> Any:
        body = ChatMessageCreate(message=message, message_type=message_type, file_url=file_url, file_name=file_name)
        return self._api.post(f"/chat/conversations/{conversation_id}/messages", body.to_body())

    def mark_read(self, conversation_id: Any) -> Any:
        return self._api.put(f"/chat/conversations/{conversation_id}/read")

    def close(self, conversation_id: Any) -> Any:
        return self._api.put(f"/chat/conversations/{conversation_id}/close")

    def unread_count(self) -> Any:
        return self._api.get("/chat/unread-count")

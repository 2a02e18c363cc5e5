"""Admin API (``/admin/*`` and ``/chat/admin/*``).

Grouped under ``client.admin`` with one namespace per back-office screen:
``contact``, ``projects``, ``reservations``, ``dashboard``, ``hotel``, ``blog``,
``offers``, ``testimonials``, ``newsletter``, ``logs``, ``messages`` and
``chat``. All endpoints require an admin token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional

from ..models import (
    AdminChatConversationCreate,
    AdminMessageCreate,
    Payload,
    ProjectComment,
    as_body,
)
from ._base import Resource

if TYPE_CHECKING:
    from ..base import BaseApiClient

Params = Optional[Mapping[str, Any]]


def _hotel_params(hotel_id: Any) -> Optional[dict]:
    return {"hotel_id": hotel_id} if hotel_id else None


class AdminContactResource(Resource):
    def list(self, params: Params = None) -> Any:
        return self._api.get("/admin/contact", params)

    def get(self, message_id: Any) -> Any:
        return self._api.get(f"/admin/contact/{message_id}")

    def update(self, message_id: Any, data: Payload) -> Any:
        return self._api.put(f"/admin/contact/{message_id}", as_body(data))

    def reply(self, message_id: Any, reply_text: str) -> Any:
        return self._api.post(f"/admin/contact/{message_id}/reply", {"reply_text": reply_text})

    def delete(self, message_id: Any, permanent: bool = False) -> Any:
        return self._api.delete(f"/admin/contact/{message_id}", {"permanent": permanent})

    def stats(self) -> Any:
        return self._api.get("/admin/contact/stats/overview")


class AdminProjectsResource(Resource):
    def list(self, params: Params = None) -> Any:
        return self._api.get("/admin/projects", params)

    def get(self, project_id: Any) -> Any:
        return self._api.get(f"/admin/projects/{project_id}")

    def create(self, data: Payload) -> Any:
        return self._api.post("/admin/projects", as_body(data))

    def update(self, project_id: Any, data: Payload) -> Any:
        return self._api.put(f"/admin/projects/{project_id}", as_body(data))

    def delete(self, project_id: Any) -> Any:
        return self._api.delete(f"/admin/projects/{project_id}")

    def clients(self, params: Params = None) -> Any:
        return self._api.get("/admin/dashboard/users", params)

    def create_task(self, project_id: Any, data: Payload) -> Any:
        return self._api.post(f"/admin/projects/{project_id}/tasks", as_body(data))

    def update_task(self, task_id: Any, data: Payload) -> Any:
        return self._api.put(f"/admin/projects/tasks/{task_id}", as_body(data))

    def delete_task(self, task_id: Any) -> Any:
        return self._api.delete(f"/admin/projects/tasks/{task_id}")

    def create_milestone(self, project_id: Any, data: Payload) -> Any:
        return self._api.post(f"/admin/projects/{project_id}/milestones", as_body(data))

    def update_milestone(self, milestone_id: Any, data: Payload) -> Any:
        return self._api.put(f"/admin/projects/milestones/{milestone_id}", as_body(data))

    def delete_milestone(self, milestone_id: Any) -> Any:
        return self._api.delete(f"/admin/projects/milestones/{milestone_id}")

    def add_comment(self, project_id: Any, comment: str, is_internal: bool = False) -> Any:
        body = ProjectComment(comment=comment, is_internal=is_internal).to_body()
        return self._api.post(f"/admin/projects/{project_id}/comments", body)

    def stats(self) -> Any:
        return self._api.get("/admin/projects/stats/overview")

    def upload_file(self, project_id: Any, data: Payload) -> Any:
        """Attach an already-hosted file (JSON metadata, no multipart)."""
        return self._api.post(f"/admin/projects/{project_id}/files", as_body(data))

    def delete_file(self, file_id: Any) -> Any:
        return self._api.delete(f"/admin/projects/files/{file_id}")

    def send_update(self, project_id: Any, data: Payload) -> Any:
        return self._api.post(f"/admin/projects/{project_id}/update-message", as_body(data))


class AdminReservationsResource(Resource):
    def list(self, params: Params = None) -> Any:
        return self._api.get("/admin/reservations", params)

    def get(self, reservation_id: Any) -> Any:
        return self._api.get(f"/admin/reservations/{reservation_id}")

    def create(self, data: Payload) -> Any:
        return self._api.post("/admin/reservations", as_body(data))

    def update(self, reservation_id: Any, data: Payload) -> Any:
        return self._api.put(f"/admin/reservations/{reservation_id}", as_body(data))

    def delete(self, reservation_id: Any) -> Any:
        return self._api.delete(f"/admin/reservations/{reservation_id}")

    def calendar(self, month: int, year: int) -> Any:
        return self._api.get("/admin/reservations/calendar/view", {"month": month, "year": year})

    def stats(self) -> Any:
        return self._api.get("/admin/reservations/stats/overview")


class AdminDashboardResource(Resource):
    def overview(self) -> Any:
        return self._api.get("/admin/dashboard")

    def revenue(self) -> Any:
        return self._api.get("/admin/dashboard/stats/revenue")

    def activity_logs(self, params: Params = None) -> Any:
        return self._api.get("/admin/dashboard/activity-logs", params)

    def users(self, params: Params = None) -> Any:
        return self._api.get("/admin/dashboard/users", params)

    def user_details(self, user_id: Any) -> Any:
        return self._api.get(f"/admin/dashboard/users/{user_id}")

    def send_notification(self, data: Payload) -> Any:
        return self._api.post("/admin/dashboard/notifications/send", as_body(data))

    def search(self, query: str) -> Any:
        return self._api.get("/admin/dashboard/search", {"q": query})


class AdminHotelResource(Resource):
    """Hotel back office: staff roles, rooms, revenue and weekly menus."""

    def users(self, params: Params = None) -> Any:
        return self._api.get("/admin/hotel/users", params)

    def update_user_role(self, user_id: Any, role: str) -> Any:
        return self._api.put(f"/admin/hotel/users/{user_id}/role", {"role": role})

    def revenue_forecast(self, hotel_id: Any = None) -> Any:
        return self._api.get("/admin/hotel/revenue-forecast", _hotel_params(hotel_id))

    def rooms_availability(self, hotel_id: Any = None) -> Any:
        return self._api.get("/admin/hotel/rooms/availability", _hotel_params(hotel_id))

    def update_room_type(self, room_type_id: Any, data: Payload) -> Any:
        return self._api.put(f"/admin/hotel/room-types/{room_type_id}", as_body(data))

    def add_room(self, data: Payload) -> Any:
        return self._api.post("/admin/hotel/rooms", as_body(data))

    def delete_room(self, room_id: Any) -> Any:
        return self._api.delete(f"/admin/hotel/rooms/{room_id}")

    def weekly_menus(self, params: Params = None) -> Any:
        return self._api.get("/admin/hotel/weekly-menus", params)

    def create_weekly_menu(self, data: Payload) -> Any:
        return self._api.post("/admin/hotel/weekly-menus", as_body(data))

    def update_weekly_menu(self, menu_id: Any, data: Payload) -> Any:
        return self._api.put(f"/admin/hotel/weekly-menus/{menu_id}", as_body(data))

    def reservations(self, hotel_id: Any = None) -> Any:
        return self._api.get("/admin/hotel/reservations", _hotel_params(hotel_id))


class _AdminListing(Resource):
    path: str = ""

    def list(self, params: Params = None) -> Any:
        return self._api.get(self.path, params)

    def stats(self) -> Any:
        return self._api.get(f"{self.path}/stats")


class AdminBlogResource(_AdminListing):
    path = "/admin/blog"


class AdminOffersResource(_AdminListing):
    path = "/admin/offers"


class AdminTestimonialsResource(_AdminListing):
    path = "/admin/testimonials"

    def approve(self, testimonial_id: Any) -> Any:
        return self._api.put(f"{self.path}/{testimonial_id}/approve")


class AdminNewsletterResource(Resource):
    def subscribers(self, params: Params = None) -> Any:
        return self._api.get("/admin/newsletter/subscribers", params)

    def send(self, data: Payload) -> Any:
        return self._api.post("/admin/newsletter/send", as_body(data))

    def stats(self) -> Any:
        return self._api.get("/admin/newsletter/stats")

    def export(self) -> Any:
        return self._api.get("/admin/newsletter/export")


class AdminLogsResource(Resource):
    def activity(self, params: Params = None) -> Any:
        return self._api.get("/admin/logs/activity", params)

    def alerts(self, params: Params = None) -> Any:
        return self._api.get("/admin/logs/alerts", params)

    def resolve_alert(self, alert_id: Any) -> Any:
        return self._api.put(f"/admin/logs/alerts/{alert_id}/resolve")

    def stats(self) -> Any:
        return self._api.get("/admin/logs/stats")


class AdminMessagesResource(Resource):
    def conversations(self) -> Any:
        return self._api.get("/admin/messages/conversations")

    def user_messages(self, user_id: Any) -> Any:
        return self._api.get(f"/admin/messages/user/{user_id}")

    def conversation(self, message_id: Any) -> Any:
        return self._api.get(f"/admin/messages/conversations/{message_id}")

    def send_to_user(self, user_id: Any, message: str, title: Optional[str] = None) -> Any:
        body = AdminMessageCreate(message=message, title=title).to_body()
        return self._api.post(f"/admin/messages/user/{user_id}/send", body)


class AdminChatResource(Resource):
    def conversations(self, params: Params = None) -> Any:
        return self._api.get("/chat/admin/all", params)

    def create_conversation(self, user_id: Any, subject: Optional[str] = None) -> Any:
        """Create, or fetch the existing, conversation with a client."""
        body = AdminChatConversationCreate(user_id=user_id)
        if subject:
            body.subject = subject
        return self._api.post("/chat/admin/conversations", body.to_body())

    def stats(self) -> Any:
        return self._api.get("/chat/admin/stats")


class AdminNamespace:
    def __init__(self, api: "BaseApiClient") -> None:
        self.contact = AdminContactResource(api)
        self.projects = AdminProjectsResource(api)
        self.reservations = AdminReservationsResource(api)
        self.dashboard = AdminDashboardResource(api)
        self.hotel = AdminHotelResource(api)
        self.blog = AdminBlogResource(api)
        self.offers = AdminOffersResource(api)
        self.testimonials = AdminTestimonialsResource(api)
        self.newsletter = AdminNewsletterResource(api)
        self.logs = AdminLogsResource(api)
        self.messages = AdminMessagesResource(api)
        self.chat = AdminChatResource(api)

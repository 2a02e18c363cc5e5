"""Public site content: blog, offers, testimonials and newsletter.

Public reads live under ``/api/...``; the write endpoints share the same paths
and require an admin token. Admin listings and stats are in ``admin``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..models import NewsletterSubscription, Payload, as_body
from ._base import Resource


class _CrudContent(Resource):
    path: str = ""

    def list(self, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._api.get(self.path, params)

    def create(self, data: Payload) -> Any:
        return self._api.post(self.path, as_body(data))

    def update(self, item_id: Any, data: Payload) -> Any:
        return self._api.put(f"{self.path}/{item_id}", as_body(data))

    def delete(self, item_id: Any) -> Any:
        return self._api.delete(f"{self.path}/{item_id}")


class BlogResource(_CrudContent):
    path = "/api/blog"

    def by_slug(self, slug: str) -> Any:
        return self._api.get(f"{self.path}/{slug}")

    def categories(self) -> Any:
        return self._api.get(f"{self.path}/categories")

    def tags(self) -> Any:
        return self._api.get(f"{self.path}/tags")


class OffersResource(_CrudContent):
    path = "/api/offers"

    def by_slug(self, slug: str) -> Any:
        return self._api.get(f"{self.path}/{slug}")


class TestimonialsResource(_CrudContent):
    path = "/api/testimonials"

    def get(self, testimonial_id: Any) -> Any:
        return self._api.get(f"{self.path}/{testimonial_id}")


class NewsletterResource(Resource):
    def subscribe(self, email: str, name: Optional[str] = None) -> Any:
        body = NewsletterSubscription(email=email, name=name).to_body()
        return self._api.post("/api/newsletter/subscribe", body)

    def unsubscribe(self, email: str) -> Any:
        return self._api.post("/api/newsletter/unsubscribe", {"email": email})

"""Booking backend API client

Overview
--------
Thin HTTP client for the LE SAGE DEV booking REST backend. Each resource of
the backend is exposed as a namespace; every namespace call goes through the
shared request core in ``BaseApiClient``.

Namespaces
----------
- ``auth``, ``users``, ``notifications``, ``settings``
- ``dishes``, ``categories``, ``menus``
- ``reservations``, ``favorites``, ``reviews``, ``loyalty``, ``contact``
- ``blog``, ``offers``, ``testimonials``, ``newsletter``
- ``messages``, ``chat``, ``payments``, ``projects``
- ``admin`` (nested: ``contact``, ``projects``, ``reservations``, ``dashboard``,
  ``hotel``, ``blog``, ``offers``, ``testimonials``, ``newsletter``, ``logs``,
  ``messages``, ``chat``)

Authentication
--------------
``auth.login`` / ``auth.register`` store the returned JWT in the client's
``TokenStore``. Pass a ``FileTokenStore`` to keep it across processes, and a
``SessionTokenExchange`` to pick up users who signed in through the identity
provider.

Usage
-----
>>> client = BookingApiClient("http://localhost:5000")
>>> client.auth.login({"email": "guest@example.com", "password": "secret123"})
>>> dishes = client.dishes.list({"category": "starters"})
>>> client.reservations.my()
"""

from __future__ import annotations

from typing import Callable, Optional

import httpx

from lesage_booking.auth.session_exchange import SessionTokenExchange
from lesage_booking.auth.token_store import FileTokenStore, TokenStore
from lesage_booking.core.config import settings

from .base import BaseApiClient
from .resources import (
    AdminNamespace,
    AuthResource,
    BlogResource,
    CategoriesResource,
    ChatResource,
    ContactResource,
    DishesResource,
    FavoritesResource,
    LoyaltyResource,
    MenusResource,
    MessagesResource,
    NewsletterResource,
    NotificationsResource,
    OffersResource,
    PaymentsResource,
    ProjectsResource,
    ReservationsResource,
    ReviewsResource,
    SettingsResource,
    TestimonialsResource,
    UsersResource,
)


class BookingApiClient(BaseApiClient):
    """Namespaced client for the booking backend.

    Accepts the same arguments as ``BaseApiClient``.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        token_store: Optional[TokenStore] = None,
        token_exchange: Optional[SessionTokenExchange] = None,
        on_session_expired: Optional[Callable[[], None]] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(
            base_url,
            token_store=token_store,
            token_exchange=token_exchange,
            on_session_expired=on_session_expired,
            timeout=timeout,
            client=client,
        )
        self.auth = AuthResource(self)
        self.users = UsersResource(self)
        self.notifications = NotificationsResource(self)
        self.settings = SettingsResource(self)
        self.dishes = DishesResource(self)
        self.categories = CategoriesResource(self)
        self.menus = MenusResource(self)
        self.reservations = ReservationsResource(self)
        self.favorites = FavoritesResource(self)
        self.reviews = ReviewsResource(self)
        self.loyalty = LoyaltyResource(self)
        self.contact = ContactResource(self)
        self.blog = BlogResource(self)
        self.offers = OffersResource(self)
        self.testimonials = TestimonialsResource(self)
        self.newsletter = NewsletterResource(self)
        self.messages = MessagesResource(self)
        self.chat = ChatResource(self)
        self.payments = PaymentsResource(self)
        self.projects = ProjectsResource(self)
        self._admin = AdminNamespace(self)

    @property
    def admin(self) -> AdminNamespace:
        """Namespaced admin API access."""
        return self._admin

    @classmethod
    def from_settings(cls, *, persistent: bool = True, **kwargs) -> "BookingApiClient":
        """Build a client from environment settings.

        Uses ``NEXT_PUBLIC_API_URL``, a ``FileTokenStore`` at ``LESAGE_TOKEN_FILE``
        when ``persistent`` is set, and a session exchange against
        ``NEXT_PUBLIC_APP_URL`` when it is configured.
        """
        kwargs.setdefault("token_store", FileTokenStore(settings.token_file) if persistent else None)
        if settings.app_url and "token_exchange" not in kwargs:
            kwargs["token_exchange"] = SessionTokenExchange(settings.app_url)
        return cls(settings.api_url, **kwargs)

"""Endpoint groups exposed as namespaces on ``BookingApiClient``."""

from .admin import AdminNamespace
from .auth import AuthResource
from .catalogue import CategoriesResource, DishesResource, MenusResource
from .content import BlogResource, NewsletterResource, OffersResource, TestimonialsResource
from .engagement import ContactResource, FavoritesResource, LoyaltyResource, ReviewsResource
from .messaging import ChatResource, MessagesResource
from .payments import PaymentsResource
from .projects import ProjectsResource
from .reservations import ReservationsResource
from .users import NotificationsResource, SettingsResource, UsersResource

__all__ = [
    "AdminNamespace",
    "AuthResource",
    "BlogResource",
    "CategoriesResource",
    "ChatResource",
    "ContactResource",
    "DishesResource",
    "FavoritesResource",
    "LoyaltyResource",
    "MenusResource",
    "MessagesResource",
    "NewsletterResource",
    "NotificationsResource",
    "OffersResource",
    "PaymentsResource",
    "ProjectsResource",
    "ReservationsResource",
    "ReviewsResource",
    "SettingsResource",
    "TestimonialsResource",
    "UsersResource",
]

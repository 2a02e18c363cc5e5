"""Booking backend API clients, models and errors."""

from .base import BaseApiClient, query_params
from .client import BookingApiClient
from .errors import (
    BookingApiError,
    InvalidResponseError,
    NotAuthenticatedError,
    NotFoundError,
    ServerUnreachableError,
    TokenExpiredError,
    UploadError,
)
from .hotel import HotelApiClient
from .url import get_api_base_url

__all__ = [
    "BaseApiClient",
    "BookingApiClient",
    "BookingApiError",
    "HotelApiClient",
    "InvalidResponseError",
    "NotAuthenticatedError",
    "NotFoundError",
    "ServerUnreachableError",
    "TokenExpiredError",
    "UploadError",
    "get_api_base_url",
    "query_params",
]

"""
Booking Client Dependencies.

Provides process-wide ``BookingApiClient`` and ``AuthConfig`` instances for the
API endpoints. Tests override ``get_booking_client`` through
``app.dependency_overrides``.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from lesage_booking.api.client import BookingApiClient
from lesage_booking.auth.config import AuthConfig, build_auth_config
from lesage_booking.core.config import settings


@lru_cache(maxsize=1)
def get_booking_client() -> BookingApiClient:
    # Anonymous client: the password endpoints never carry a user token
    return BookingApiClient(settings.api_url)


@lru_cache(maxsize=1)
def get_auth_config() -> AuthConfig:
    return build_auth_config()


BookingClientDep = Annotated[BookingApiClient, Depends(get_booking_client)]
AuthConfigDep = Annotated[AuthConfig, Depends(get_auth_config)]

"""Error types raised by the booking API clients.

Purpose:
- Provide typed exceptions thrown by ``BookingApiClient`` and ``HotelApiClient``.
- Expose HTTP-oriented context (status code, decoded error body) for diagnosis.

Usage:
- Catch ``BookingApiError`` for general failures and inspect ``status_code`` or
  ``details``.
- Catch ``TokenExpiredError`` to send the user back to the login screen.
"""

from __future__ import annotations

from typing import Any, Optional


class BookingApiError(Exception):
    """Base error for booking API failures.

    Args:
        message: Human-readable error description, usually the backend's ``error``.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional decoded response body.
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class NotAuthenticatedError(BookingApiError):
    """Raised for 401 responses."""


class TokenExpiredError(NotAuthenticatedError):
    """Raised for 401 responses caused by an expired or invalid bearer token."""


class NotFoundError(BookingApiError):
    """Raised for 404 responses."""


class InvalidResponseError(BookingApiError):
    """Raised when the backend answers with a body that is not JSON."""


class ServerUnreachableError(BookingApiError):
    """Raised when the backend cannot be contacted at all."""


class UploadError(BookingApiError):
    """Raised when a multipart file upload fails."""


def error_for_status(status_code: int, message: str, details: Any = None) -> BookingApiError:
    """Build the most specific error type for an HTTP status."""
    if status_code == 401:
        return NotAuthenticatedError(message, status_code=status_code, details=details)
    if status_code == 404:
        return NotFoundError(message, status_code=status_code, details=details)
    return BookingApiError(message, status_code=status_code, details=details)

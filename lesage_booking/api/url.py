"""Backend base URL resolution."""

from __future__ import annotations

from typing import Optional

from lesage_booking.core.config import DEFAULT_API_URL, settings


def get_api_base_url(api_url: Optional[str] = None, *, secure_context: Optional[bool] = None) -> str:
    """Return the backend base URL without a trailing slash.

    When the caller runs on an HTTPS origin, a remote ``http://`` URL is upgraded
    to ``https://`` to avoid mixed content. Local URLs are left untouched.

    Args:
        api_url: Explicit URL; defaults to ``NEXT_PUBLIC_API_URL``.
        secure_context: Whether the caller is on HTTPS; defaults to ``LESAGE_SECURE_CONTEXT``.
    """
    url = api_url or settings.api_url or DEFAULT_API_URL
    secure = settings.secure_context if secure_context is None else secure_context
    if secure and url.startswith("http://") and "localhost" not in url:
        url = url.replace("http://", "https://", 1)
    if url.endswith("/"):
        url = url[:-1]
    return url

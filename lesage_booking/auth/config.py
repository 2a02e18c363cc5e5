"""
Authentication Configuration.

Declarative configuration for the identity provider that fronts the booking
site: email/password accounts, Google OAuth, two-factor, cookie sessions and
the ORM tables that hold identities. The provider itself is an external
service; this module only builds and validates the configuration it is handed.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field

from lesage_booking.core.config import DEFAULT_FRONTEND_URL, AuthEnvConfig, settings

logger = logging.getLogger(__name__)

APP_NAME = "LE SAGE DEV"
AUTH_BASE_PATH = "/api/auth"
LOCAL_ORIGIN = "http://localhost:3000"

PRODUCTION_ORIGINS = (
    "https://lesagedev.com",
    "https://www.lesagedev.com",
    "https://hotel-demo-murex.vercel.app",
    LOCAL_ORIGIN,
)

DAY = 60 * 60 * 24

ResetPasswordSender = Callable[[Mapping[str, Any], str], None]


def log_reset_password(user: Mapping[str, Any], url: str) -> None:
    """Default reset-password sender: log the link instead of mailing it."""
    logger.info("Reset password for %s -> %s", user.get("email"), url)


# =====================================================================
# Configuration Models
# =====================================================================


class DatabaseAdapterConfig(BaseModel):
    """ORM adapter and the table/model names identities are stored in."""

    adapter: str = Field(default="prisma", description="ORM adapter used by the identity provider")
    provider: str = Field(default="postgresql", description="Database engine behind the adapter")
    user_model: str = Field(default="betterAuthUser", description="Model holding user identities")
    account_model: str = Field(default="betterAuthAccount", description="Model holding linked accounts")
    verification_model: str = Field(default="betterAuthVerification", description="Model holding verification tokens")
    session_model: str = Field(default="betterAuthSession", description="Model holding sessions")
    account_fields: Dict[str, str] = Field(
        default_factory=lambda: {"accessTokenExpiresAt": "expiresAt"},
        description="Account field renames (provider field -> column)",
    )


class AccountLinkingConfig(BaseModel):
    enabled: bool = True
    trusted_providers: List[str] = Field(default_factory=lambda: ["google", "email-password"])
    allow_different_emails: bool = False


class EmailPasswordConfig(BaseModel):
    enabled: bool = True
    require_email_verification: bool = False
    min_password_length: int = Field(default=8, ge=1)
    send_reset_password: ResetPasswordSender = Field(default=log_reset_password, exclude=True)


class SocialProviderConfig(BaseModel):
    client_id: str = ""
    client_secret: str = Field(default="", repr=False)
    enabled: bool = False


class CookieCacheConfig(BaseModel):
    enabled: bool = True
    max_age: int = Field(default=60 * 5, description="Seconds a session is served from the cookie cache")


class SessionConfig(BaseModel):
    expires_in: int = Field(default=7 * DAY, description="Session lifetime in seconds")
    update_age: int = Field(default=DAY, description="Refresh the session expiry at most this often")
    cookie_cache: CookieCacheConfig = Field(default_factory=CookieCacheConfig)


class TwoFactorConfig(BaseModel):
    enabled: bool = True
    issuer: str = APP_NAME
    table: str = "better_auth_two_factor"


class AuthConfig(BaseModel):
    """Complete identity-provider configuration."""

    app_name: str = APP_NAME
    secret: Optional[str] = Field(default=None, repr=False)
    base_url: str
    base_path: str = AUTH_BASE_PATH
    database: DatabaseAdapterConfig = Field(default_factory=DatabaseAdapterConfig)
    account_linking: AccountLinkingConfig = Field(default_factory=AccountLinkingConfig)
    email_and_password: EmailPasswordConfig = Field(default_factory=EmailPasswordConfig)
    social_providers: Dict[str, SocialProviderConfig] = Field(default_factory=dict)
    session: SessionConfig = Field(default_factory=SessionConfig)
    trusted_origins: List[str] = Field(default_factory=list)
    two_factor: TwoFactorConfig = Field(default_factory=TwoFactorConfig)

    @property
    def auth_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{self.base_path}"

    def is_trusted_origin(self, origin: str) -> bool:
        return origin.rstrip("/") in {o.rstrip("/") for o in self.trusted_origins}

    def enabled_social_providers(self) -> List[str]:
        return [name for name, p in self.social_providers.items() if p.enabled]

    def send_reset_password(self, user: Mapping[str, Any], url: str) -> None:
        self.email_and_password.send_reset_password(user, url)

    def public_view(self) -> Dict[str, Any]:
        """Configuration safe to expose to browsers (no secrets)."""
        return {
            "app_name": self.app_name,
            "base_url": self.base_url,
            "base_path": self.base_path,
            "email_and_password": {
                "enabled": self.email_and_password.enabled,
                "require_email_verification": self.email_and_password.require_email_verification,
                "min_password_length": self.email_and_password.min_password_length,
            },
            "social_providers": self.enabled_social_providers(),
            "two_factor": {"enabled": self.two_factor.enabled, "issuer": self.two_factor.issuer},
            "session": self.session.model_dump(),
        }


# =====================================================================
# Builders
# =====================================================================


def _vercel_origin(env: AuthEnvConfig) -> Optional[str]:
    return f"https://{env.vercel_url}" if env.vercel_url else None


def resolve_base_url(env: Optional[AuthEnvConfig] = None) -> str:
    """``BETTER_AUTH_URL``, then ``NEXTAUTH_URL``, then ``https://$VERCEL_URL``, then localhost.

    ``BETTER_AUTH_URL`` must be set in production; the Vercel host is only a
    fallback.
    """
    env = env or settings.auth
    return env.better_auth_url or env.nextauth_url or _vercel_origin(env) or LOCAL_ORIGIN


def _unique(items: Iterable[Optional[str]]) -> List[str]:
    seen: List[str] = []
    for item in items:
        if item and item not in seen:
            seen.append(item)
    return seen


def build_trusted_origins(base_url: str, env: Optional[AuthEnvConfig] = None) -> List[str]:
    """Origins allowed to call the auth endpoints, empty entries dropped."""
    env = env or settings.auth
    vercel: List[Optional[str]] = []
    if env.vercel_url:
        vercel = [f"https://{env.vercel_url}", f"https://www.{env.vercel_url}"]
    return _unique(
        [
            base_url,
            env.frontend_url or DEFAULT_FRONTEND_URL,
            env.app_url,
            *PRODUCTION_ORIGINS,
            *vercel,
        ]
    )


def build_auth_config(
    env: Optional[AuthEnvConfig] = None,
    *,
    send_reset_password: Optional[ResetPasswordSender] = None,
) -> AuthConfig:
    """Build the identity-provider configuration from the environment.

    Args:
        env: Environment group; defaults to ``settings.auth``.
        send_reset_password: Hook called with ``(user, url)`` for password resets;
            defaults to logging the link.
    """
    env = env or settings.auth
    base_url = resolve_base_url(env)
    email_password = EmailPasswordConfig()
    if send_reset_password is not None:
        email_password.send_reset_password = send_reset_password
    if not env.secret:
        logger.warning("BETTER_AUTH_SECRET is not set; sessions cannot be signed")
    config = AuthConfig(
        secret=env.secret,
        base_url=base_url,
        email_and_password=email_password,
        social_providers={
            "google": SocialProviderConfig(
                client_id=env.google_client_id or "",
                client_secret=env.google_client_secret or "",
                enabled=bool(env.google_client_id),
            )
        },
        trusted_origins=build_trusted_origins(base_url, env),
    )
    logger.debug("Auth configured: base_url=%s providers=%s", config.auth_url, config.enabled_social_providers())
    return config

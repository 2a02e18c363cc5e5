"""
Configuration Settings.

This module defines the client configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.

Environment names follow the ones used by the web frontend (``NEXT_PUBLIC_*``,
``BETTER_AUTH_*``) so a single ``.env`` can drive both.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_FRONTEND_URL = "http://localhost:3000"
# Seeded by the backend migration ``seed_default_hotel_fixed_id``
DEFAULT_HOTEL_ID = "b2178a5e-9a4f-4c8d-9e1b-2a3c4d5e6f70"

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class AuthEnvConfig(BaseModel):
    """Identity provider environment (base URL candidates, secrets, OAuth)."""

    secret: Optional[str] = Field(
        default=None, alias="BETTER_AUTH_SECRET", description="Secret used to sign auth sessions"
    )
    better_auth_url: Optional[str] = Field(
        default=None, alias="BETTER_AUTH_URL", description="Public base URL of the auth server (required in production)"
    )
    nextauth_url: Optional[str] = Field(
        default=None, alias="NEXTAUTH_URL", description="Legacy base URL, used when BETTER_AUTH_URL is unset"
    )
    vercel_url: Optional[str] = Field(
        default=None, alias="VERCEL_URL", description="Deployment host name (without scheme)"
    )
    frontend_url: Optional[str] = Field(
        default=None, alias="FRONTEND_URL", description="Frontend origin trusted by the auth server"
    )
    app_url: Optional[str] = Field(
        default=None, alias="NEXT_PUBLIC_APP_URL", description="Public application origin"
    )
    google_client_id: Optional[str] = Field(
        default=None, alias="GOOGLE_CLIENT_ID", description="Google OAuth client id"
    )
    google_client_secret: Optional[str] = Field(
        default=None, alias="GOOGLE_CLIENT_SECRET", description="Google OAuth client secret"
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}


class CORSConfig(BaseModel):
    """CORS configuration for the companion server."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Client settings model.

    All properties are automatically bound from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Backend API
    # =====================================================================
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the booking REST backend",
        alias="NEXT_PUBLIC_API_URL",
    )
    hotel_id: str = Field(
        default=DEFAULT_HOTEL_ID,
        description="Hotel used by the hotel API when none is given",
        alias="NEXT_PUBLIC_HOTEL_ID",
    )
    app_url: Optional[str] = Field(
        default=None,
        description="Origin of the web application (serves /api/backend-token)",
        alias="NEXT_PUBLIC_APP_URL",
    )
    frontend_url: str = Field(
        default=DEFAULT_FRONTEND_URL,
        description="Frontend origin",
        alias="FRONTEND_URL",
    )
    secure_context: bool = Field(
        default=False,
        description="Whether the caller runs on an HTTPS origin (forces HTTPS for remote APIs)",
        alias="LESAGE_SECURE_CONTEXT",
    )
    http_timeout: float = Field(
        default=10.0,
        description="Default timeout in seconds for backend HTTP calls",
        alias="LESAGE_HTTP_TIMEOUT",
    )
    token_file: Path = Field(
        default=Path("~/.lesage/tokens.json"),
        description="Path of the persistent token store",
        alias="LESAGE_TOKEN_FILE",
    )

    # =====================================================================
    # Companion Server
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="Companion server host address to bind to",
        alias="LESAGE_SERVER_HOST",
    )
    server_port: int = Field(
        default=3001,
        description="Companion server port number",
        alias="LESAGE_SERVER_PORT",
    )

    # =====================================================================
    # Logging
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="LESAGE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to <LOG_FILE_DIR>/lesage_booking.log",
        alias="ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Identity provider (read as a group through ``auth``)
    # =====================================================================
    better_auth_secret: Optional[str] = Field(default=None, alias="BETTER_AUTH_SECRET")
    better_auth_url: Optional[str] = Field(default=None, alias="BETTER_AUTH_URL")
    nextauth_url: Optional[str] = Field(default=None, alias="NEXTAUTH_URL")
    vercel_url: Optional[str] = Field(default=None, alias="VERCEL_URL")
    google_client_id: Optional[str] = Field(default=None, alias="GOOGLE_CLIENT_ID")
    google_client_secret: Optional[str] = Field(default=None, alias="GOOGLE_CLIENT_SECRET")

    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def auth(self) -> AuthEnvConfig:
        """Get identity provider configuration from environment variables."""
        return AuthEnvConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()

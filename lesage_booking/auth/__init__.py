"""Authentication layer: token storage, session exchange and provider configuration.

The login and password-recovery flows live in ``lesage_booking.auth.password``.
"""

from .config import AuthConfig, build_auth_config, build_trusted_origins, resolve_base_url
from .errors import FlowError, ValidationError
from .session_exchange import SessionTokenExchange
from .token_store import LEGACY_TOKEN_KEY, TOKEN_KEY, FileTokenStore, MemoryTokenStore, TokenStore

__all__ = [
    "AuthConfig",
    "FileTokenStore",
    "FlowError",
    "LEGACY_TOKEN_KEY",
    "MemoryTokenStore",
    "SessionTokenExchange",
    "TOKEN_KEY",
    "TokenStore",
    "ValidationError",
    "build_auth_config",
    "build_trusted_origins",
    "resolve_base_url",
]

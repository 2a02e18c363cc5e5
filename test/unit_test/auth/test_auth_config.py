from __future__ import annotations

import logging

import pytest

from lesage_booking.auth.config import (
    AUTH_BASE_PATH,
    LOCAL_ORIGIN,
    PRODUCTION_ORIGINS,
    build_auth_config,
    build_trusted_origins,
    resolve_base_url,
)
from lesage_booking.core.config import DEFAULT_FRONTEND_URL, AuthEnvConfig


@pytest.mark.parametrize(
    "env,expected",
    [
        (AuthEnvConfig(better_auth_url="https://auth.lesagedev.com", nextauth_url="https://old"), "https://auth.lesagedev.com"),
        (AuthEnvConfig(nextauth_url="https://old.lesagedev.com", vercel_url="x.vercel.app"), "https://old.lesagedev.com"),
        (AuthEnvConfig(vercel_url="hotel-demo.vercel.app"), "https://hotel-demo.vercel.app"),
        (AuthEnvConfig(), LOCAL_ORIGIN),
    ],
)
def test_resolve_base_url_fallback_chain(env: AuthEnvConfig, expected: str) -> None:
    assert resolve_base_url(env) == expected


def test_trusted_origins_are_unique_and_non_empty() -> None:
    env = AuthEnvConfig(vercel_url="preview.vercel.app", app_url="https://lesagedev.com")
    origins = build_trusted_origins("https://lesagedev.com", env)

    assert origins[0] == "https://lesagedev.com"
    assert DEFAULT_FRONTEND_URL in origins
    assert "https://preview.vercel.app" in origins
    assert "https://www.preview.vercel.app" in origins
    assert len(origins) == len(set(origins))
    assert all(origins)
    assert set(PRODUCTION_ORIGINS) <= set(origins)


def test_trusted_origins_without_vercel() -> None:
    origins = build_trusted_origins(LOCAL_ORIGIN, AuthEnvConfig())
    assert not any("vercel.app" in o and "hotel-demo" not in o for o in origins)


def test_google_enabled_only_with_client_id() -> None:
    config = build_auth_config(AuthEnvConfig(secret="s", google_client_id="gid", google_client_secret="gsecret"))
    assert config.enabled_social_providers() == ["google"]
    assert config.social_providers["google"].client_secret == "gsecret"

    assert build_auth_config(AuthEnvConfig(secret="s")).enabled_social_providers() == []


def test_defaults() -> None:
    config = build_auth_config(AuthEnvConfig(secret="s", better_auth_url="https://lesagedev.com/"))

    assert config.auth_url == f"https://lesagedev.com{AUTH_BASE_PATH}"
    assert config.email_and_password.min_password_length == 8
    assert config.session.expires_in == 7 * 24 * 3600
    assert config.session.update_age == 24 * 3600
    assert config.session.cookie_cache.max_age == 300
    assert config.two_factor.issuer == "LE SAGE DEV"
    assert config.database.user_model == "betterAuthUser"
    assert config.is_trusted_origin("https://www.lesagedev.com/")
    assert not config.is_trusted_origin("https://evil.example")


def test_missing_secret_logs_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="lesage_booking.auth.config"):
        config = build_auth_config(AuthEnvConfig())
    assert config.secret is None
    assert "BETTER_AUTH_SECRET is not set" in caplog.text


def test_public_view_hides_secrets() -> None:
    config = build_auth_config(
        AuthEnvConfig(secret="top-secret", google_client_id="gid", google_client_secret="gsecret")
    )
    view = config.public_view()

    assert "top-secret" not in str(view)
    assert "gsecret" not in str(view)
    assert view["social_providers"] == ["google"]
    assert view["email_and_password"]["min_password_length"] == 8


def test_reset_password_sender_hook() -> None:
    sent = []
    config = build_auth_config(AuthEnvConfig(secret="s"), send_reset_password=lambda user, url: sent.append((user, url)))

    config.send_reset_password({"email": "a@b.co"}, "https://lesagedev.com/reset?token=t")

    assert sent == [({"email": "a@b.co"}, "https://lesagedev.com/reset?token=t")]
    assert "send_reset_password" not in config.model_dump()["email_and_password"]


def test_default_sender_logs_link(caplog) -> None:
    config = build_auth_config(AuthEnvConfig(secret="s"))
    with caplog.at_level(logging.INFO, logger="lesage_booking.auth.config"):
        config.send_reset_password({"email": "a@b.co"}, "https://x/reset")
    assert "a@b.co" in caplog.text
    assert "https://x/reset" in caplog.text

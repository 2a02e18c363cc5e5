import pytest

from lesage_booking.api.url import get_api_base_url


@pytest.mark.parametrize(
    "url,secure,expected",
    [
        ("http://api.lesagedev.com/", False, "http://api.lesagedev.com"),
        ("http://api.lesagedev.com", True, "https://api.lesagedev.com"),
        ("http://localhost:5000/", True, "http://localhost:5000"),
        ("https://api.lesagedev.com", True, "https://api.lesagedev.com"),
    ],
)
def test_get_api_base_url(url: str, secure: bool, expected: str) -> None:
    assert get_api_base_url(url, secure_context=secure) == expected


def test_defaults_to_settings(monkeypatch) -> None:
    from lesage_booking.core import config as config_module

    monkeypatch.setattr(config_module.settings, "api_url", "http://backend:5000/")
    monkeypatch.setattr(config_module.settings, "secure_context", False)
    assert get_api_base_url() == "http://backend:5000"

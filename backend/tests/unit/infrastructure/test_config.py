"""Unit tests for settings loading."""

import pytest

from infrastructure.config import Settings, load_settings

ENV_VARS = [
    "APP_VERSION",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "CORS_ALLOW_ORIGINS",
    "RATE_LIMIT_ENABLED",
    "RATE_LIMIT_WINDOW_S",
    "RATE_LIMIT_MAX_REQUESTS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings(load_env_file=False)

    assert settings == Settings()
    assert settings.port == 3000
    assert settings.rate_limit_window_s == 900
    assert settings.rate_limit_max_requests == 100
    assert settings.cors_allow_origins == ("*",)


def test_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "10")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "http://a.test, http://b.test")

    settings = load_settings(load_env_file=False)

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.rate_limit_enabled is False
    assert settings.rate_limit_max_requests == 10
    assert settings.cors_allow_origins == ("http://a.test", "http://b.test")


def test_invalid_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RATE_LIMIT_WINDOW_S", "fifteen")

    with pytest.raises(ValueError, match="RATE_LIMIT_WINDOW_S"):
        load_settings(load_env_file=False)

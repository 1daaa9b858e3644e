"""Testes para config.settings (email e base)."""

from __future__ import annotations

import pytest

from config.settings import (
    EMAIL_API_BASE_URL,
    BaseSettings,
    EmailSettings,
    get_base_settings,
    get_email_settings,
)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_email_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_email_settings.cache_clear()
    get_base_settings.cache_clear()


class TestEmailSettings:
    """Testa defaults, env e validação."""

    def test_defaults(self) -> None:
        settings = EmailSettings()
        assert settings.api_base_url == EMAIL_API_BASE_URL
        assert settings.emails_endpoint == "https://api.resend.com/emails"
        assert settings.request_timeout_seconds == 30.0

    def test_endpoint_strips_trailing_slash(self) -> None:
        settings = EmailSettings(api_base_url="http://localhost:8025/")
        assert settings.emails_endpoint == "http://localhost:8025/emails"

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RESEND_API_KEY", "re_env")
        monkeypatch.setenv("RESEND_BASE_URL", "https://staging.example.com")
        monkeypatch.setenv("RESEND_REQUEST_TIMEOUT_SECONDS", "12.5")
        monkeypatch.setenv("RESEND_TEMPLATES_DIR", "/srv/templates")

        settings = get_email_settings()

        assert settings.api_key == "re_env"
        assert settings.emails_endpoint == "https://staging.example.com/emails"
        assert settings.request_timeout_seconds == 12.5
        assert settings.templates_dir == "/srv/templates"
        assert get_email_settings() is settings

    def test_validate(self) -> None:
        assert EmailSettings(api_key="re_1").validate() == []

        errors = EmailSettings(
            api_key="",
            api_base_url="ftp://x",
            request_timeout_seconds=0,
        ).validate()

        assert len(errors) == 3


class TestBaseSettings:
    """Testa BaseSettings."""

    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("SERVICE_NAME", "billing")
        monkeypatch.setenv("LOG_LEVEL", "warning")

        settings = get_base_settings()

        assert settings.is_production
        assert settings.service_name == "billing"
        assert settings.log_level == "WARNING"

    def test_debug_defaults_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("DEBUG", "true")
        assert get_base_settings().log_level == "DEBUG"

    def test_validate(self) -> None:
        assert BaseSettings().validate() == []
        assert len(BaseSettings(service_name="", log_level="LOUD").validate()) == 2

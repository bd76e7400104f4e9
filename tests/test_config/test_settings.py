"""Testes das settings do relay (carga de env + validate)."""

from __future__ import annotations

import pytest

from config.settings import (
    DEFAULT_CHANNEL,
    DEFAULT_PORT,
    DEFAULT_WEBHOOK_NAME,
    BaseSettings,
    QueueSettings,
    RelaySettings,
    SparkPostSettings,
    get_base_settings,
    get_queue_settings,
    get_relay_settings,
    get_sparkpost_settings,
)


class TestBaseSettings:
    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("ENVIRONMENT", "PORT", "REDIS_URL", "SERVICE_NAME"):
            monkeypatch.delenv(key, raising=False)

        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.port == DEFAULT_PORT == 5000
        assert settings.redis_url == ""
        assert settings.validate() == []

    def test_port_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "8080")
        assert get_base_settings().port == 8080

    def test_invalid_port_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PORT", "not-a-port")
        errors = get_base_settings().validate()
        assert any("PORT" in error for error in errors)

    def test_environment_aliases(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        assert get_base_settings().is_production is True


class TestSparkPostSettings:
    def test_requires_url_and_key(self) -> None:
        errors = SparkPostSettings().validate()
        assert "SPARKPOST_API_URL não configurado" in errors
        assert "SPARKPOST_API_KEY não configurado" in errors

    def test_base_url_gets_trailing_slash(self) -> None:
        settings = SparkPostSettings(api_url="https://api.sparkpost.test/api/v1")
        assert settings.base_url == "https://api.sparkpost.test/api/v1/"

    def test_timeout_unset_means_unbounded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SPARKPOST_REQUEST_TIMEOUT_SECONDS", raising=False)
        assert get_sparkpost_settings().request_timeout_seconds is None

    def test_invalid_timeout_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SPARKPOST_API_URL", "https://api.sparkpost.test")
        monkeypatch.setenv("SPARKPOST_API_KEY", "key")
        monkeypatch.setenv("SPARKPOST_REQUEST_TIMEOUT_SECONDS", "abc")

        errors = get_sparkpost_settings().validate()

        assert errors == ["SPARKPOST_REQUEST_TIMEOUT_SECONDS deve ser > 0"]

    def test_webhook_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SPARKPOST_WEBHOOK_NAME", raising=False)
        monkeypatch.delenv("SPARKPOST_WEBHOOK_AUTH_TOKEN", raising=False)

        settings = get_sparkpost_settings()

        assert settings.webhook_name == DEFAULT_WEBHOOK_NAME == "Forwarding Service"
        assert settings.webhook_auth_token == ""


class TestRelaySettings:
    def test_requires_forwarding_addresses(self) -> None:
        errors = RelaySettings().validate()
        assert "FORWARD_FROM não configurado" in errors
        assert "FORWARD_TO não configurado" in errors

    def test_build_app_url(self) -> None:
        settings = RelaySettings(forward_from="a@b", forward_to="c@d")
        assert settings.build_app_url("relay.example.com") == "https://relay.example.com/message"

    def test_scheme_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELAY_APP_URL_SCHEME", "HTTP")
        settings = get_relay_settings()
        assert settings.build_app_url("localhost") == "http://localhost/message"

    def test_rejects_unknown_scheme(self) -> None:
        settings = RelaySettings(forward_from="a@b", forward_to="c@d", app_url_scheme="ftp")
        assert settings.validate() == ["RELAY_APP_URL_SCHEME deve ser 'http' ou 'https'"]


class TestQueueSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("RELAY_QUEUE_BACKEND", raising=False)
        monkeypatch.delenv("RELAY_QUEUE_CHANNEL", raising=False)

        settings = get_queue_settings()

        assert settings.backend == "redis"
        assert settings.channel == DEFAULT_CHANNEL == "queue"

    def test_redis_requires_url(self) -> None:
        errors = QueueSettings(backend="redis").validate(BaseSettings())
        assert errors == ["RELAY_QUEUE_BACKEND=redis requer REDIS_URL configurado"]

    def test_redis_with_url_is_valid(self) -> None:
        base = BaseSettings(redis_url="redis://localhost:6379/0")
        assert QueueSettings(backend="redis").validate(base) == []

    def test_memory_forbidden_outside_development(self) -> None:
        base = BaseSettings(environment="production")
        errors = QueueSettings(backend="memory").validate(base)
        assert len(errors) == 1
        assert "proibido" in errors[0]

    def test_memory_allowed_in_development(self) -> None:
        assert QueueSettings(backend="memory").validate(BaseSettings()) == []

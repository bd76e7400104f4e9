"""Configuração do pytest para o projeto inbound-relay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from config.settings import (  # noqa: E402
    get_base_settings,
    get_queue_settings,
    get_relay_settings,
    get_sparkpost_settings,
)

RELAY_ENV = {
    "ENVIRONMENT": "development",
    "SPARKPOST_API_URL": "https://api.sparkpost.test/api/v1",
    "SPARKPOST_API_KEY": "test-api-key",
    "FORWARD_FROM": "svc@relay.test",
    "FORWARD_TO": "inbox@example.com",
    "RELAY_QUEUE_BACKEND": "memory",
}


def _clear_settings_cache() -> None:
    get_base_settings.cache_clear()
    get_queue_settings.cache_clear()
    get_relay_settings.cache_clear()
    get_sparkpost_settings.cache_clear()


@pytest.fixture(autouse=True)
def _isolated_settings():
    """Settings são lru_cache: limpa antes e depois de cada teste."""
    _clear_settings_cache()
    yield
    _clear_settings_cache()


@pytest.fixture
def relay_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Ambiente mínimo válido (fila em memória)."""
    for key in ("REDIS_URL", "PORT", "RELAY_QUEUE_CHANNEL", "SPARKPOST_REQUEST_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)
    for key, value in RELAY_ENV.items():
        monkeypatch.setenv(key, value)
    return dict(RELAY_ENV)

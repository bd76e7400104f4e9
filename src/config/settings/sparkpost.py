"""Settings do provedor de relay (SparkPost).

Configurações da API REST usada para transmissões, inbound domains
e relay webhooks. Cada integração externa tem seu próprio arquivo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Nome com que o relay webhook é registrado no provedor
DEFAULT_WEBHOOK_NAME: str = "Forwarding Service"


@dataclass(frozen=True)
class SparkPostSettings:
    """Configurações da API SparkPost.

    Attributes:
        api_url: URL base da API (ex: https://api.sparkpost.com/api/v1/)
        api_key: Chave enviada como header Authorization
        request_timeout_seconds: Timeout das chamadas (None = sem limite)
        webhook_name: Nome do relay webhook criado por este serviço
        webhook_auth_token: Token que o provedor envia ao chamar /message
    """

    api_url: str = ""
    api_key: str = ""
    request_timeout_seconds: float | None = None
    webhook_name: str = DEFAULT_WEBHOOK_NAME
    webhook_auth_token: str = ""

    @property
    def base_url(self) -> str:
        """URL base normalizada com barra final para paths relativos."""
        if not self.api_url:
            return ""
        return self.api_url if self.api_url.endswith("/") else f"{self.api_url}/"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do provedor.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_url:
            errors.append("SPARKPOST_API_URL não configurado")

        if not self.api_key:
            errors.append("SPARKPOST_API_KEY não configurado")

        if self.request_timeout_seconds is not None and self.request_timeout_seconds <= 0:
            errors.append("SPARKPOST_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_timeout(raw: str) -> float | None:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return -1.0


def _load_from_env() -> SparkPostSettings:
    """Carrega SparkPostSettings a partir de variáveis de ambiente."""
    return SparkPostSettings(
        api_url=os.getenv("SPARKPOST_API_URL", ""),
        api_key=os.getenv("SPARKPOST_API_KEY", ""),
        request_timeout_seconds=_parse_timeout(
            os.getenv("SPARKPOST_REQUEST_TIMEOUT_SECONDS", "")
        ),
        webhook_name=os.getenv("SPARKPOST_WEBHOOK_NAME", DEFAULT_WEBHOOK_NAME),
        webhook_auth_token=os.getenv("SPARKPOST_WEBHOOK_AUTH_TOKEN", ""),
    )


@lru_cache(maxsize=1)
def get_sparkpost_settings() -> SparkPostSettings:
    """Retorna instância cacheada de SparkPostSettings."""
    return _load_from_env()

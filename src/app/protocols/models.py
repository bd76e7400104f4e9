"""Contratos de dados do relay.

Tipos canônicos compartilhados entre camada api/ (conectores, rotas)
e camada app/ (use cases, worker).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

SMTP_PROTOCOL = "SMTP"


@dataclass(frozen=True, slots=True)
class ProviderOk:
    """Chamada ao provedor concluída com HTTP 200."""

    status_code: int
    body: Any = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ProviderFailure:
    """Chamada ao provedor rejeitada ou sem resposta.

    `status_code` é None quando a falha ocorreu antes de haver resposta
    (DNS, conexão recusada, timeout).
    """

    status_code: int | None
    body: str = ""

    @property
    def ok(self) -> bool:
        return False

    def describe(self) -> str:
        """Texto de diagnóstico no formato '<status> <body>'."""
        status = "" if self.status_code is None else str(self.status_code)
        return f"{status} {self.body}".strip()


ProviderResult = ProviderOk | ProviderFailure


@dataclass(frozen=True, slots=True)
class WebhookRegistration:
    """Relay webhook registrado no provedor (somente leitura)."""

    target: str
    domain: str
    name: str = ""
    protocol: str = SMTP_PROTOCOL

    @classmethod
    def from_provider(cls, data: dict[str, Any]) -> WebhookRegistration:
        """Constrói a partir de um item de `results` da API."""
        match = data.get("match") or {}
        return cls(
            target=str(data.get("target", "")),
            domain=str(match.get("domain", "")),
            name=str(data.get("name", "")),
            protocol=str(match.get("protocol", SMTP_PROTOCOL)),
        )


@dataclass(frozen=True, slots=True)
class TransmissionRequest:
    """Envio de um email RFC 822 completo para um destinatário."""

    recipient_email: str
    email_rfc822: str


@dataclass(frozen=True, slots=True)
class WebhookLookupResult:
    """Resultado da busca do relay webhook deste serviço."""

    app_url: str
    domain: str | None = None
    failure: ProviderFailure | None = None

    @property
    def found(self) -> bool:
        return self.domain is not None

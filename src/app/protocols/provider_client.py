"""Protocolo do cliente da API do provedor de relay.

Evita dependência direta da camada app/ sobre api/connectors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ProviderFailure, ProviderResult, WebhookRegistration


class RelayProviderClientProtocol(Protocol):
    """Contrato mínimo para o cliente do provedor (sem retries)."""

    async def list_inbound_webhooks(
        self,
    ) -> list[WebhookRegistration] | ProviderFailure: ...

    async def create_inbound_webhook(self, target_url: str, domain: str) -> ProviderResult: ...

    async def create_inbound_domain(self, domain: str) -> ProviderResult: ...

    async def send_transmission(
        self,
        recipient_email: str,
        raw_email: str,
    ) -> ProviderResult: ...

"""Use cases de provisionamento do relay inbound no provedor.

Chamados por um operador; não interagem com a fila. Nenhuma deduplicação:
chamadas repetidas criam registros adicionais no provedor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import ProviderFailure, WebhookLookupResult

if TYPE_CHECKING:
    from app.protocols.models import ProviderResult
    from app.protocols.provider_client import RelayProviderClientProtocol
    from config.settings import RelaySettings

logger = logging.getLogger(__name__)


class ProvisionInboundUseCase:
    """Consulta e cria relay webhooks e inbound domains.

    Args:
        provider: Cliente da API do provedor
        relay_settings: Usado para montar a URL pública de /message
    """

    def __init__(
        self,
        provider: RelayProviderClientProtocol,
        relay_settings: RelaySettings,
    ) -> None:
        self._provider = provider
        self._relay_settings = relay_settings

    def app_url_for(self, hostname: str) -> str:
        """URL de /message vista pelo provedor a partir do host da requisição."""
        return self._relay_settings.build_app_url(hostname)

    async def lookup_webhook(self, hostname: str) -> WebhookLookupResult:
        """Procura o relay webhook cujo target é a URL deste serviço.

        O primeiro registro com target igual vence.
        """
        app_url = self.app_url_for(hostname)
        registrations = await self._provider.list_inbound_webhooks()
        if isinstance(registrations, ProviderFailure):
            return WebhookLookupResult(app_url=app_url, failure=registrations)

        for registration in registrations:
            if registration.target == app_url:
                return WebhookLookupResult(app_url=app_url, domain=registration.domain)

        logger.info(
            "inbound_webhook_not_found",
            extra={"app_url": app_url, "registrations": len(registrations)},
        )
        return WebhookLookupResult(app_url=app_url)

    async def create_webhook(self, hostname: str, domain: str) -> tuple[str, ProviderResult]:
        """Registra relay webhook do domínio apontando para este serviço."""
        app_url = self.app_url_for(hostname)
        return app_url, await self._provider.create_inbound_webhook(app_url, domain)

    async def create_domain(self, domain: str) -> ProviderResult:
        return await self._provider.create_inbound_domain(domain)

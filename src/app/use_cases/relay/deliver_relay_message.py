"""Use case de entrega: retransmite uma RelayMessage ao destinatário fixo."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.protocols.models import ProviderFailure

if TYPE_CHECKING:
    from app.protocols.models import ProviderResult
    from app.protocols.provider_client import RelayProviderClientProtocol

logger = logging.getLogger(__name__)


class DeliverRelayMessageUseCase:
    """Envia a mensagem como transmissão; falhas são logadas e descartadas."""

    def __init__(self, provider: RelayProviderClientProtocol, forward_to: str) -> None:
        self._provider = provider
        self._forward_to = forward_to

    async def execute(self, message: str) -> ProviderResult:
        result = await self._provider.send_transmission(self._forward_to, message)

        if isinstance(result, ProviderFailure):
            logger.error(
                "transmission_failed",
                extra={
                    "status_code": result.status_code,
                    "response_body": result.body,
                    "message_size": len(message),
                },
            )
            return result

        logger.info(
            "transmission_succeeded",
            extra={
                "status_code": result.status_code,
                "response_body": result.body,
                "message_size": len(message),
            },
        )
        return result

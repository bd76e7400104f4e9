"""Use case de ingestão: reescreve o remetente e publica na fila."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.domain.relay_message import rewrite_from_header

if TYPE_CHECKING:
    from app.protocols.relay_queue import RelayPublisherProtocol


@dataclass(frozen=True, slots=True)
class IngestResult:
    """Resumo de uma ingestão (sem conteúdo do email)."""

    message_size: int
    receivers: int


class IngestInboundMessageUseCase:
    """Transforma o email bruto em RelayMessage e publica uma única vez.

    Toda mensagem publicada já tem o From: reescrito; o worker de entrega
    nunca inspeciona o remetente. A publicação não espera a entrega.
    """

    def __init__(self, publisher: RelayPublisherProtocol, forward_from: str) -> None:
        self._publisher = publisher
        self._forward_from = forward_from

    async def execute(self, raw_email: str) -> IngestResult:
        """Reescreve e publica.

        Raises:
            RedisConnectionError: Canal indisponível.
        """
        message = rewrite_from_header(raw_email, self._forward_from)
        receivers = await self._publisher.publish(message)
        return IngestResult(message_size=len(message), receivers=receivers)

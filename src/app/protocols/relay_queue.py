"""Protocolos do canal pub/sub entre ingestão e entrega.

A mensagem é apenas o texto RFC 822 já reescrito: sem id, sem metadados.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class RelayPublisherProtocol(ABC):
    """Lado de publicação do canal de relay."""

    @abstractmethod
    async def publish(self, message: str) -> int:
        """Publica a mensagem no canal.

        Returns:
            Número de assinantes que receberam a mensagem (0 = perdida).

        Raises:
            RedisConnectionError: Se o backend estiver indisponível.
        """

    @abstractmethod
    async def ping(self) -> bool:
        """Verifica se o backend de publicação responde."""

    @abstractmethod
    async def close(self) -> None:
        """Libera a conexão de publicação."""


class RelaySubscriberProtocol(ABC):
    """Lado de consumo do canal de relay."""

    @abstractmethod
    async def subscribe(self) -> None:
        """Inscreve no canal; mensagens publicadas antes disso são perdidas."""

    @abstractmethod
    def messages(self) -> AsyncIterator[str]:
        """Itera as mensagens na ordem de publicação, indefinidamente.

        Raises:
            RedisConnectionError: Se a conexão de inscrição cair.
        """

    @abstractmethod
    async def reset(self) -> None:
        """Descarta a inscrição; a próxima messages() inscreve de novo."""

    @abstractmethod
    async def close(self) -> None:
        """Cancela a inscrição e libera a conexão."""

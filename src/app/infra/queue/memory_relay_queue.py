"""Canal de relay em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Mesmas garantias do Redis
Pub/Sub: sem persistência, sem assinante = mensagem descartada.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from app.protocols.relay_queue import RelayPublisherProtocol, RelaySubscriberProtocol

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


class MemoryRelayChannel:
    """Fan-out in-process: cada assinante tem sua própria fila FIFO."""

    def __init__(self) -> None:
        self._subscribers: list[asyncio.Queue[str]] = []

    def attach(self) -> asyncio.Queue[str]:
        queue: asyncio.Queue[str] = asyncio.Queue()
        self._subscribers.append(queue)
        return queue

    def detach(self, queue: asyncio.Queue[str]) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)

    def broadcast(self, message: str) -> int:
        for queue in self._subscribers:
            queue.put_nowait(message)
        return len(self._subscribers)


class MemoryRelayPublisher(RelayPublisherProtocol):
    """Publisher em memória — apenas para dev/test."""

    def __init__(self, channel: MemoryRelayChannel) -> None:
        self._channel = channel
        self.published: list[str] = []

    async def publish(self, message: str) -> int:
        self.published.append(message)
        return self._channel.broadcast(message)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        return None


class MemoryRelaySubscriber(RelaySubscriberProtocol):
    """Subscriber em memória — apenas para dev/test."""

    def __init__(self, channel: MemoryRelayChannel) -> None:
        self._channel = channel
        self._queue: asyncio.Queue[str] | None = None

    async def subscribe(self) -> None:
        self._ensure_attached()

    def _ensure_attached(self) -> asyncio.Queue[str]:
        if self._queue is None:
            self._queue = self._channel.attach()
        return self._queue

    async def messages(self) -> AsyncIterator[str]:
        queue = self._ensure_attached()
        while True:
            yield await queue.get()

    async def reset(self) -> None:
        await self.close()

    async def close(self) -> None:
        if self._queue is not None:
            self._channel.detach(self._queue)
            self._queue = None

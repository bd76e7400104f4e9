"""Canal de relay sobre Redis Pub/Sub.

Duas conexões de escopo de processo: uma publica (PUBLISH), outra fica
inscrita (SUBSCRIBE). Redis Pub/Sub não persiste nada: mensagem publicada
sem assinante conectado é perdida, e a ordem entregue é a de publicação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from redis.exceptions import RedisError

from app.protocols.relay_queue import RelayPublisherProtocol, RelaySubscriberProtocol
from utils.errors import RedisConnectionError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from redis.asyncio import Redis as AsyncRedis
    from redis.asyncio.client import PubSub

logger = logging.getLogger(__name__)


async def _close_client(redis_client: AsyncRedis) -> None:
    close_async = getattr(redis_client, "aclose", None)
    if callable(close_async):
        await close_async()
    else:
        await redis_client.close()


class RedisRelayPublisher(RelayPublisherProtocol):
    """Publica mensagens de relay no canal Redis.

    Args:
        redis_client: Cliente Redis assíncrono dedicado à publicação
        channel: Nome do canal
    """

    def __init__(self, redis_client: AsyncRedis, channel: str) -> None:
        self._redis = redis_client
        self._channel = channel

    async def publish(self, message: str) -> int:
        try:
            receivers = await self._redis.publish(self._channel, message)
        except RedisError as exc:
            logger.error(
                "relay_queue_publish_failed",
                extra={"channel": self._channel, "error_type": type(exc).__name__},
            )
            raise RedisConnectionError("Falha ao publicar mensagem no Redis") from exc

        if not receivers:
            logger.warning("relay_queue_no_subscribers", extra={"channel": self._channel})
        return int(receivers)

    async def ping(self) -> bool:
        try:
            return bool(await self._redis.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        await _close_client(self._redis)

class RedisRelaySubscriber(RelaySubscriberProtocol):
    """Consome mensagens de relay do canal Redis.

    Args:
        redis_client: Cliente Redis assíncrono dedicado à inscrição
        channel: Nome do canal
    """

    def __init__(self, redis_client: AsyncRedis, channel: str) -> None:
        self._redis = redis_client
        self._channel = channel
        self._pubsub: PubSub | None = None

    async def subscribe(self) -> None:
        await self._ensure_subscribed()

    async def _ensure_subscribed(self) -> PubSub:
        if self._pubsub is not None:
            return self._pubsub
        pubsub = self._redis.pubsub(ignore_subscribe_messages=True)
        try:
            await pubsub.subscribe(self._channel)
        except RedisError as exc:
            await self._discard(pubsub)
            raise RedisConnectionError("Falha ao inscrever no canal Redis") from exc
        self._pubsub = pubsub
        logger.info("relay_queue_subscribed", extra={"channel": self._channel})
        return pubsub

    async def messages(self) -> AsyncIterator[str]:
        """Itera mensagens do canal.

        Raises:
            RedisConnectionError: Inscrição falhou ou a conexão caiu durante
                a leitura. A inscrição deve ser descartada com reset().
        """
        pubsub = await self._ensure_subscribed()
        try:
            async for item in pubsub.listen():
                if item.get("type") != "message":
                    continue
                data = item.get("data")
                yield data.decode("utf-8") if isinstance(data, bytes) else str(data)
        except RedisError as exc:
            logger.warning(
                "relay_queue_listen_failed",
                extra={"channel": self._channel, "error_type": type(exc).__name__},
            )
            raise RedisConnectionError("Conexão de inscrição Redis perdida") from exc

    async def reset(self) -> None:
        """Descarta a inscrição atual; a conexão do cliente é mantida."""
        pubsub = self._pubsub
        self._pubsub = None
        if pubsub is not None:
            await self._discard(pubsub)

    async def close(self) -> None:
        pubsub = self._pubsub
        self._pubsub = None
        if pubsub is not None:
            try:
                await pubsub.unsubscribe(self._channel)
            except RedisError as exc:
                logger.warning(
                    "relay_queue_unsubscribe_failed",
                    extra={"channel": self._channel, "error_type": type(exc).__name__},
                )
            await self._discard(pubsub)
        await _close_client(self._redis)

    async def _discard(self, pubsub: PubSub) -> None:
        try:
            close_async = getattr(pubsub, "aclose", None)
            if callable(close_async):
                await close_async()
            else:
                await pubsub.close()
        except RedisError as exc:
            logger.warning(
                "relay_queue_pubsub_close_failed",
                extra={"channel": self._channel, "error_type": type(exc).__name__},
            )

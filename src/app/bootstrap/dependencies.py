"""Composition root do relay — cria e encerra dependências de processo.

Conexões (publisher Redis, subscriber Redis, AsyncClient do provedor)
são criadas uma vez no startup e fechadas explicitamente no shutdown.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_async_redis_client, create_provider_client
from app.coordinators.relay import RelayDeliveryWorker
from app.infra.queue import (
    MemoryRelayChannel,
    MemoryRelayPublisher,
    MemoryRelaySubscriber,
    RedisRelayPublisher,
    RedisRelaySubscriber,
)
from app.use_cases.relay import (
    DeliverRelayMessageUseCase,
    IngestInboundMessageUseCase,
    ProvisionInboundUseCase,
)
from config.settings import (
    get_base_settings,
    get_queue_settings,
    get_relay_settings,
    get_sparkpost_settings,
)

if TYPE_CHECKING:
    from api.connectors.sparkpost import SparkPostHttpClient
    from app.protocols.relay_queue import RelayPublisherProtocol, RelaySubscriberProtocol
    from config.settings import BaseSettings, QueueSettings

logger = logging.getLogger(__name__)


@dataclass
class RelayDependencies:
    """Dependências de escopo de processo injetadas em rotas e worker."""

    publisher: RelayPublisherProtocol
    subscriber: RelaySubscriberProtocol
    provider: SparkPostHttpClient
    ingest: IngestInboundMessageUseCase
    provisioning: ProvisionInboundUseCase
    worker: RelayDeliveryWorker


# ──────────────────────────────────────────────────────────────────────────────
# Relay Queue Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_relay_queue(
    base: BaseSettings,
    queue: QueueSettings,
) -> tuple[RelayPublisherProtocol, RelaySubscriberProtocol]:
    """Cria o par publisher/subscriber conforme RELAY_QUEUE_BACKEND.

    - "redis": duas conexões Redis distintas no mesmo canal
    - "memory": canal in-process (dev/test)
    """
    if queue.backend == "memory":
        logger.warning("relay_queue_memory_backend", extra={"channel": queue.channel})
        channel = MemoryRelayChannel()
        return MemoryRelayPublisher(channel), MemoryRelaySubscriber(channel)

    publisher = RedisRelayPublisher(
        create_async_redis_client(base.redis_url, role="publisher"),
        queue.channel,
    )
    subscriber = RedisRelaySubscriber(
        create_async_redis_client(base.redis_url, role="subscriber"),
        queue.channel,
    )
    return publisher, subscriber


def create_relay_dependencies() -> RelayDependencies:
    """Monta o grafo de dependências a partir das settings já validadas."""
    relay_settings = get_relay_settings()
    publisher, subscriber = create_relay_queue(get_base_settings(), get_queue_settings())
    provider = create_provider_client(get_sparkpost_settings())

    worker = RelayDeliveryWorker(
        subscriber=subscriber,
        deliver=DeliverRelayMessageUseCase(provider, relay_settings.forward_to),
    )
    return RelayDependencies(
        publisher=publisher,
        subscriber=subscriber,
        provider=provider,
        ingest=IngestInboundMessageUseCase(publisher, relay_settings.forward_from),
        provisioning=ProvisionInboundUseCase(provider, relay_settings),
        worker=worker,
    )


async def shutdown_relay_dependencies(deps: RelayDependencies) -> None:
    """Para o worker (fecha o subscriber) e fecha publisher e cliente HTTP."""
    await deps.worker.stop()
    await deps.publisher.close()
    await deps.provider.aclose()
    logger.info("relay_dependencies_closed")

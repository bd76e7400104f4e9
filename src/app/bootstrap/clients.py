"""Factories de clientes externos — Redis e provedor SparkPost.

Sem cache: cada chamada cria uma conexão nova. O composition root
(dependencies.py) cria cada cliente uma única vez no startup e o fecha
no shutdown.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from redis.asyncio import Redis as AsyncRedis

    from api.connectors.sparkpost import SparkPostHttpClient
    from config.settings import SparkPostSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Redis Client Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_async_redis_client(redis_url: str, *, role: str) -> AsyncRedis:
    """Cria cliente Redis assíncrono.

    Args:
        redis_url: URL de conexão (REDIS_URL)
        role: "publisher" ou "subscriber" (apenas para log)

    Raises:
        ValueError: Se redis_url vazio
    """
    from redis.asyncio import Redis as AsyncRedis

    if not redis_url:
        msg = "REDIS_URL não configurado"
        raise ValueError(msg)

    # Subscriber fica bloqueado em leitura indefinidamente: sem socket_timeout
    client: AsyncRedis = AsyncRedis.from_url(
        redis_url,
        decode_responses=False,
        socket_connect_timeout=5.0,
        socket_timeout=5.0 if role == "publisher" else None,
    )

    host = client.connection_pool.connection_kwargs.get("host", "unknown")
    logger.info("async_redis_client_created", extra={"host": host, "role": role})
    return client


# ──────────────────────────────────────────────────────────────────────────────
# Provider Client Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_provider_client(settings: SparkPostSettings) -> SparkPostHttpClient:
    """Cria cliente da API SparkPost com AsyncClient de escopo de processo."""
    from api.connectors.sparkpost import create_sparkpost_http_client

    client = create_sparkpost_http_client(settings)
    logger.info(
        "provider_client_created",
        extra={
            "base_url": settings.base_url,
            "timeout_seconds": settings.request_timeout_seconds,
        },
    )
    return client

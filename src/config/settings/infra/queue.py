"""Settings da fila de relay (pub/sub).

Backend e canal usados entre o webhook e o worker de entrega.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

QueueBackend = Literal["memory", "redis"]

DEFAULT_CHANNEL = "queue"


@dataclass(frozen=True)
class QueueSettings:
    """Configurações da fila de relay.

    Attributes:
        backend: Backend do canal pub/sub (memory|redis)
        channel: Nome do canal único de publicação
    """

    backend: QueueBackend = "redis"
    channel: str = DEFAULT_CHANNEL

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida configurações da fila.

        Args:
            base: BaseSettings para verificar ambiente e REDIS_URL.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.backend not in ("memory", "redis"):
            errors.append(f"RELAY_QUEUE_BACKEND inválido: {self.backend}")

        if self.backend == "memory" and not base.is_development:
            errors.append(
                "RELAY_QUEUE_BACKEND=memory proibido em staging/production. Use Redis."
            )

        if self.backend == "redis" and not base.redis_url:
            errors.append("RELAY_QUEUE_BACKEND=redis requer REDIS_URL configurado")

        if not self.channel:
            errors.append("RELAY_QUEUE_CHANNEL não pode ser vazio")

        return errors


def _load_queue_from_env() -> QueueSettings:
    """Carrega QueueSettings de variáveis de ambiente."""
    backend_str = os.getenv("RELAY_QUEUE_BACKEND", "redis").lower()
    backend: QueueBackend = backend_str if backend_str in ("memory", "redis") else "redis"
    return QueueSettings(
        backend=backend,
        channel=os.getenv("RELAY_QUEUE_CHANNEL", DEFAULT_CHANNEL),
    )


@lru_cache(maxsize=1)
def get_queue_settings() -> QueueSettings:
    """Retorna instância cacheada de QueueSettings."""
    return _load_queue_from_env()

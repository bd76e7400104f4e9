"""Agregador de settings de infraestrutura.

Re-exporta as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.queue import (
    DEFAULT_CHANNEL,
    QueueBackend,
    QueueSettings,
    get_queue_settings,
)

__all__ = [
    "DEFAULT_CHANNEL",
    "QueueBackend",
    "QueueSettings",
    "get_queue_settings",
]

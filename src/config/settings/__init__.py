"""Agregador de settings do inbound-relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_PORT,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    DEFAULT_CHANNEL,
    QueueBackend,
    QueueSettings,
    get_queue_settings,
)

# Relay settings
from config.settings.relay import RelaySettings, get_relay_settings

# Provider settings
from config.settings.sparkpost import (
    DEFAULT_WEBHOOK_NAME,
    SparkPostSettings,
    get_sparkpost_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CHANNEL",
    "DEFAULT_PORT",
    "DEFAULT_WEBHOOK_NAME",
    # Base
    "BaseSettings",
    "Environment",
    # Infrastructure
    "QueueBackend",
    "QueueSettings",
    # Relay
    "RelaySettings",
    # Provider
    "SparkPostSettings",
    "get_base_settings",
    "get_queue_settings",
    "get_relay_settings",
    "get_sparkpost_settings",
]

"""Implementações do canal de relay (Redis e memória)."""

from .memory_relay_queue import (
    MemoryRelayChannel,
    MemoryRelayPublisher,
    MemoryRelaySubscriber,
)
from .redis_relay_queue import RedisRelayPublisher, RedisRelaySubscriber

__all__ = [
    "MemoryRelayChannel",
    "MemoryRelayPublisher",
    "MemoryRelaySubscriber",
    "RedisRelayPublisher",
    "RedisRelaySubscriber",
]

"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    InfrastructureError,
    InvalidRelayPayloadError,
    RedisConnectionError,
)

__all__ = [
    "ConfigurationError",
    "InfrastructureError",
    "InvalidRelayPayloadError",
    "RedisConnectionError",
]

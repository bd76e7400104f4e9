"""Builders de payload da API SparkPost."""

from .relay import (
    build_inbound_domain_payload,
    build_relay_webhook_payload,
    build_transmission_payload,
)

__all__ = [
    "build_inbound_domain_payload",
    "build_relay_webhook_payload",
    "build_transmission_payload",
]

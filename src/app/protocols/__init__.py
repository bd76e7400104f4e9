"""Protocolos e contratos do core da aplicação."""

from .models import (
    SMTP_PROTOCOL,
    ProviderFailure,
    ProviderOk,
    ProviderResult,
    TransmissionRequest,
    WebhookLookupResult,
    WebhookRegistration,
)
from .provider_client import RelayProviderClientProtocol
from .relay_queue import RelayPublisherProtocol, RelaySubscriberProtocol

__all__ = [
    "SMTP_PROTOCOL",
    "ProviderFailure",
    "ProviderOk",
    "ProviderResult",
    "RelayProviderClientProtocol",
    "RelayPublisherProtocol",
    "RelaySubscriberProtocol",
    "TransmissionRequest",
    "WebhookLookupResult",
    "WebhookRegistration",
]

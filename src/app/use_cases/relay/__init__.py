"""Use cases do relay inbound (ingestão, entrega e provisionamento)."""

from .deliver_relay_message import DeliverRelayMessageUseCase
from .ingest_inbound_message import IngestInboundMessageUseCase, IngestResult
from .provision_inbound import ProvisionInboundUseCase

__all__ = [
    "DeliverRelayMessageUseCase",
    "IngestInboundMessageUseCase",
    "IngestResult",
    "ProvisionInboundUseCase",
]

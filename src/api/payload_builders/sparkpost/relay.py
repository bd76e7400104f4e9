"""Payloads JSON dos endpoints transmissions, relay-webhooks e inbound-domains."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.protocols.models import SMTP_PROTOCOL

if TYPE_CHECKING:
    from app.protocols.models import TransmissionRequest


def build_transmission_payload(request: TransmissionRequest) -> dict[str, Any]:
    """Transmissão de um RFC 822 completo para um único destinatário."""
    return {
        "recipients": [{"address": {"email": request.recipient_email}}],
        "content": {"email_rfc822": request.email_rfc822},
    }


def build_relay_webhook_payload(
    *,
    name: str,
    target_url: str,
    domain: str,
    auth_token: str,
) -> dict[str, Any]:
    """Relay webhook SMTP apontando o domínio para `target_url`.

    `auth_token` vazio é omitido; o provedor então não envia X-MessageSystems-Webhook-Token.
    """
    payload: dict[str, Any] = {
        "name": name,
        "target": target_url,
        "match": {
            "protocol": SMTP_PROTOCOL,
            "domain": domain,
        },
    }
    if auth_token:
        payload["auth_token"] = auth_token
    return payload


def build_inbound_domain_payload(domain: str) -> dict[str, Any]:
    return {"domain": domain}

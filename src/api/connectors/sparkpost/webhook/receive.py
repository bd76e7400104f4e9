"""Parse inicial do relay webhook (sem logar conteúdo de email)."""

from __future__ import annotations

import json
from typing import Any

from utils.errors import InvalidRelayPayloadError


class WebhookRequestError(InvalidRelayPayloadError):
    """Erro base para falhas de webhook."""


class InvalidJsonError(WebhookRequestError):
    """JSON inválido no payload do webhook."""


def parse_relay_webhook_request(raw_body: bytes) -> list[Any]:
    """Parseia o corpo do webhook como lista de eventos.

    Raises:
        InvalidJsonError: Se o corpo não for JSON ou não for uma lista
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, list):
        raise InvalidJsonError("payload_not_list")

    return payload

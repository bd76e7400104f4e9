"""Parse do corpo `{"domain": "..."}` de /inbound-webhook e /inbound-domain."""

from __future__ import annotations

import json

from utils.errors import InvalidRelayPayloadError


def parse_domain_request(raw_body: bytes) -> str:
    """Extrai o campo `domain` de um objeto JSON.

    Raises:
        InvalidRelayPayloadError: JSON inválido, corpo não-objeto ou
            `domain` ausente/vazio/não-string.
    """
    try:
        data = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidRelayPayloadError("invalid_json") from exc

    if not isinstance(data, dict):
        raise InvalidRelayPayloadError("payload_not_object")

    domain = data.get("domain")
    if not isinstance(domain, str) or not domain.strip():
        raise InvalidRelayPayloadError("domain_missing")
    return domain.strip()

"""Extração do email bruto de um relay webhook.

Estrutura do payload (SparkPost relay webhook):
    [
        {
            "msys": {
                "relay_message": {
                    "content": {"email_rfc822": "From: ...\\r\\n..."},
                    ...
                }
            }
        },
        ...
    ]

Somente o primeiro evento do lote é considerado.
"""

from __future__ import annotations

from typing import Any

from utils.errors import InvalidRelayPayloadError

_EMAIL_PATH = ("msys", "relay_message", "content", "email_rfc822")


def extract_raw_email(events: Any) -> str:
    """Retorna o RFC 822 bruto do primeiro evento.

    Raises:
        InvalidRelayPayloadError: Se o payload não for lista não-vazia ou o
            campo email_rfc822 estiver ausente, não for string ou não for
            codificável em UTF-8.
    """
    if not isinstance(events, list) or not events:
        raise InvalidRelayPayloadError("payload_not_event_list")

    node: Any = events[0]
    for key in _EMAIL_PATH:
        if not isinstance(node, dict) or key not in node:
            raise InvalidRelayPayloadError(f"missing_field:{key}")
        node = node[key]

    if not isinstance(node, str):
        raise InvalidRelayPayloadError("email_rfc822_not_string")

    # JSON admite surrogates isolados (\ud800); não viram bytes para a fila
    try:
        node.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidRelayPayloadError("email_rfc822_not_utf8") from exc
    return node

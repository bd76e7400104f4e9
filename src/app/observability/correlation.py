"""correlation_id por requisição HTTP do relay.

Cada chamada a /message ou aos endpoints de provisionamento roda dentro de
um correlation_scope: o id vem do header x-correlation-id (ou é gerado) e
vale só para os logs daquela requisição. O id não atravessa a fila de relay
(a mensagem é só o texto), então logs do worker saem com correlation_id vazio.

Uso:
    with correlation_scope(request.headers.get(CORRELATION_HEADER)):
        ...
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

# Header aceito do chamador (provedor ou operador)
CORRELATION_HEADER = "x-correlation-id"

# Ids mais longos que isso são descartados e substituídos por um gerado
MAX_CORRELATION_ID_LENGTH = 128

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (vazio fora de requisição)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID v4 se ausente ou inválido.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    return _correlation_id.set(normalize_correlation_id(correlation_id))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())


def normalize_correlation_id(incoming: str | None) -> str:
    """Aceita o id do header só se for não-vazio, curto e imprimível."""
    candidate = (incoming or "").strip()
    if not candidate or len(candidate) > MAX_CORRELATION_ID_LENGTH or not candidate.isprintable():
        return generate_correlation_id()
    return candidate


@contextmanager
def correlation_scope(incoming: str | None = None) -> Iterator[str]:
    """Vincula um correlation_id ao bloco e restaura o anterior na saída."""
    token = set_correlation_id(incoming)
    try:
        yield _correlation_id.get()
    finally:
        reset_correlation_id(token)

"""Filters de logging para injeção de contexto.

Campos injetados em cada record:
- correlation_id: ID da requisição HTTP em andamento (vazio no worker)
- service: Nome do serviço (ex: inbound_relay)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Enriquece o record; nunca descarta.

        Um correlation_id passado via `extra` tem precedência sobre o contexto.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing or self._get_correlation_id()
        record.service = self._service_name
        return True


# Campos de `extra` que nunca podem sair com o conteúdo do email
EMAIL_BODY_FIELDS = ("email_rfc822", "raw_email", "relay_message")


class EmailBodyRedactionFilter(logging.Filter):
    """Substitui corpos de email passados via `extra` pelo tamanho.

    Logs do relay carregam só tamanhos (`message_size`); este filter garante
    isso mesmo quando um chamador anexa o texto por engano.
    """

    def __init__(self, fields: tuple[str, ...] = EMAIL_BODY_FIELDS) -> None:
        super().__init__()
        self._fields = fields

    def filter(self, record: logging.LogRecord) -> bool:
        for name in self._fields:
            value = getattr(record, name, None)
            if isinstance(value, str):
                setattr(record, name, f"<redacted {len(value)} chars>")
        return True

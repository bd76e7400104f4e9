"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="inbound_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("transmission_succeeded", extra={"status_code": 200})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Corpos de email nunca vão para o log, apenas tamanhos.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    EMAIL_BODY_FIELDS,
    CorrelationIdFilter,
    EmailBodyRedactionFilter,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "EMAIL_BODY_FIELDS",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "EmailBodyRedactionFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
]

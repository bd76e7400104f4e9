"""Bootstrap da aplicação — logging e validação de settings.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()  # ConfigurationError se faltar algo
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_queue_settings,
    get_relay_settings,
    get_sparkpost_settings,
)
from utils.errors import ConfigurationError

# Nome do serviço para logs
SERVICE_NAME = "inbound_relay"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def collect_settings_errors() -> list[str]:
    """Agrega erros de validação de todas as settings."""
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"sparkpost: {error}" for error in get_sparkpost_settings().validate())
    errors.extend(f"relay: {error}" for error in get_relay_settings().validate())
    errors.extend(f"queue: {error}" for error in get_queue_settings().validate(base))
    return errors


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Falha rápido em qualquer ambiente: sem endereços de encaminhamento ou
    sem credenciais o relay não tem como operar.

    Raises:
        ConfigurationError: Se qualquer setting obrigatória estiver ausente.
    """
    environment = get_base_settings().environment
    errors = collect_settings_errors()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.error(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    raise ConfigurationError(environment, errors)

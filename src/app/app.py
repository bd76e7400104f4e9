"""Entrypoint da aplicação inbound-relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port $PORT

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import (
    create_relay_dependencies,
    shutdown_relay_dependencies,
)
from config.logging import get_logger
from config.settings import get_base_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (ConfigurationError aborta o boot)
    - Cria publisher/subscriber da fila e cliente do provedor
    - Inicia o worker de entrega

    Shutdown:
    - Para o worker e fecha todas as conexões
    """
    logger.info("app_starting", extra={"service": "inbound-relay"})
    validate_runtime_settings()

    deps = create_relay_dependencies()
    await deps.worker.start()
    app.state.relay = deps

    try:
        yield
    finally:
        logger.info("app_shutting_down", extra={"service": "inbound-relay"})
        app.state.relay = None
        await shutdown_relay_dependencies(deps)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="inbound-relay",
        description="Relay de emails inbound via SparkPost",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
    )
    fastapi_app.state.relay = None

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "inbound-relay"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Valida settings e sobe o servidor na porta PORT (padrão 5000)."""
    import uvicorn

    try:
        validate_runtime_settings()
    except ConfigurationError as exc:
        sys.exit(str(exc))

    port = get_base_settings().port
    logger.info("app_listening", extra={"port": port})
    uvicorn.run("app.app:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()

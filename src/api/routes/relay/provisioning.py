"""Endpoints administrativos de provisionamento no provedor.

Endpoints:
- GET /inbound-webhook: domínio do relay webhook que aponta para este serviço
- POST /inbound-webhook: registra relay webhook para {domain}
- POST /inbound-domain: registra {domain} como inbound domain

A URL pública de /message é derivada do host da requisição.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.routes.relay.runtime import get_relay_dependencies, request_hostname
from api.validators.provisioning import parse_domain_request
from app.observability import CORRELATION_HEADER, correlation_scope
from app.protocols.models import ProviderFailure
from utils.errors import InvalidRelayPayloadError

logger = logging.getLogger(__name__)

router = APIRouter()


def _invalid_data() -> JSONResponse:
    return JSONResponse(content={"err": "Invalid data"}, status_code=status.HTTP_400_BAD_REQUEST)


@router.get("/inbound-webhook")
async def get_inbound_webhook(request: Request) -> Response:
    """Busca o relay webhook cujo target é a URL de /message deste host."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)):
        deps = get_relay_dependencies(request)
        result = await deps.provisioning.lookup_webhook(request_hostname(request))

        if result.failure is not None:
            logger.error(
                "inbound_webhook_lookup_failed",
                extra={"status_code": result.failure.status_code},
            )
            return JSONResponse(
                content={"error": result.failure.describe()},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if not result.found:
            return Response(
                content="Not Found",
                media_type="text/plain",
                status_code=status.HTTP_404_NOT_FOUND,
            )

        return JSONResponse(content={"app_url": result.app_url, "domain": result.domain})


@router.post("/inbound-webhook")
async def create_inbound_webhook(request: Request) -> Response:
    """Registra relay webhook SMTP do domínio informado apontando para /message."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)):
        deps = get_relay_dependencies(request)

        try:
            domain = parse_domain_request(await request.body())
        except InvalidRelayPayloadError as exc:
            logger.warning("provisioning_payload_invalid", extra={"error": str(exc)})
            return _invalid_data()

        app_url, result = await deps.provisioning.create_webhook(request_hostname(request), domain)
        if isinstance(result, ProviderFailure):
            logger.error(
                "inbound_webhook_create_failed",
                extra={"domain": domain, "status_code": result.status_code},
            )
            return JSONResponse(
                content={"error": result.describe()},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return JSONResponse(content={"app_url": app_url})


@router.post("/inbound-domain")
async def create_inbound_domain(request: Request) -> Response:
    """Registra o domínio no provedor; falha devolve o diagnóstico bruto."""
    with correlation_scope(request.headers.get(CORRELATION_HEADER)):
        deps = get_relay_dependencies(request)

        try:
            domain = parse_domain_request(await request.body())
        except InvalidRelayPayloadError as exc:
            logger.warning("provisioning_payload_invalid", extra={"error": str(exc)})
            return _invalid_data()

        result = await deps.provisioning.create_domain(domain)
        if isinstance(result, ProviderFailure):
            logger.error(
                "inbound_domain_create_failed",
                extra={"domain": domain, "status_code": result.status_code},
            )
            return Response(
                content=result.describe(),
                media_type="text/plain",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return JSONResponse(content={"domain": domain})

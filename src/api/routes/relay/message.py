"""Endpoint de recebimento do relay webhook.

Endpoint:
- POST /message: eventos de relay do SparkPost (lista JSON)

Fluxo:
1. Parse do corpo e extração de [0].msys.relay_message.content.email_rfc822
2. Reescrita do From: e publicação na fila de relay
3. 200 OK imediato; a entrega acontece no worker, sem retorno ao provedor
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from api.connectors.sparkpost.webhook import parse_relay_webhook_request
from api.normalizers.relay import extract_raw_email
from api.routes.relay.runtime import get_relay_dependencies
from app.observability import CORRELATION_HEADER, correlation_scope
from utils.errors import InfrastructureError, InvalidRelayPayloadError

logger = logging.getLogger(__name__)

router = APIRouter()


def _text(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.post("/message")
async def receive_relay_message(request: Request) -> Response:
    """Recebe o relay webhook e publica a RelayMessage.

    Returns:
        200 "OK"; 400 "Invalid data" sem publicar; 500 se a fila falhar.
    """
    with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
        deps = get_relay_dependencies(request)
        raw_body = await request.body()

        try:
            events = parse_relay_webhook_request(raw_body)
            raw_email = extract_raw_email(events)
        except InvalidRelayPayloadError as exc:
            logger.warning(
                "webhook_payload_invalid",
                extra={
                    "correlation_id": correlation_id,
                    "error": str(exc),
                    "payload_size": len(raw_body),
                },
            )
            return _text("Invalid data", status.HTTP_400_BAD_REQUEST)

        logger.info(
            "webhook_received",
            extra={
                "correlation_id": correlation_id,
                "payload_size": len(raw_body),
                "events": len(events),
                "ignored_events": len(events) - 1,
            },
        )

        try:
            result = await deps.ingest.execute(raw_email)
        except InfrastructureError as exc:
            logger.error(
                "webhook_publish_failed",
                extra={
                    "correlation_id": correlation_id,
                    "error_type": type(exc).__name__,
                },
            )
            return _text("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(
            "relay_message_published",
            extra={
                "correlation_id": correlation_id,
                "message_size": result.message_size,
                "receivers": result.receivers,
            },
        )
        return _text("OK", status.HTTP_200_OK)

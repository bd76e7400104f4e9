"""Cliente HTTP especializado para a API SparkPost.

Estende HttpClient genérico com as operações usadas pelo relay:
- listagem e criação de relay webhooks
- criação de inbound domains
- transmissões de RFC 822 bruto

Sucesso é exclusivamente HTTP 200. Qualquer outro status, corpo 200
não-JSON ou falha de transporte vira ProviderFailure com status e corpo
brutos. Nenhuma chamada é repetida.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.sparkpost.api_errors import parse_sparkpost_errors
from api.payload_builders.sparkpost import (
    build_inbound_domain_payload,
    build_relay_webhook_payload,
    build_transmission_payload,
)
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.models import (
    ProviderFailure,
    ProviderOk,
    TransmissionRequest,
    WebhookRegistration,
)

if TYPE_CHECKING:
    import httpx

    from app.protocols.models import ProviderResult
    from config.settings import SparkPostSettings

logger: logging.Logger = logging.getLogger(__name__)

TRANSMISSIONS_PATH = "transmissions"
RELAY_WEBHOOKS_PATH = "relay-webhooks"
INBOUND_DOMAINS_PATH = "inbound-domains"


class SparkPostHttpClient(HttpClient):
    """Cliente da API SparkPost (implementa RelayProviderClientProtocol)."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        webhook_name: str,
        webhook_auth_token: str,
    ) -> None:
        super().__init__(http_client)
        self._webhook_name = webhook_name
        self._webhook_auth_token = webhook_auth_token

    async def list_inbound_webhooks(self) -> list[WebhookRegistration] | ProviderFailure:
        """Lista relay webhooks na ordem devolvida pelo provedor."""
        result = await self._call("GET", RELAY_WEBHOOKS_PATH)
        if isinstance(result, ProviderFailure):
            return result

        results = result.body.get("results") if isinstance(result.body, dict) else None
        if not isinstance(results, list):
            logger.error(
                "sparkpost_unexpected_response",
                extra={"path": RELAY_WEBHOOKS_PATH, "reason": "results_missing"},
            )
            return ProviderFailure(status_code=result.status_code, body=json.dumps(result.body))

        return [WebhookRegistration.from_provider(item) for item in results if isinstance(item, dict)]

    async def create_inbound_webhook(self, target_url: str, domain: str) -> ProviderResult:
        """Registra relay webhook SMTP para o domínio apontando para target_url."""
        payload = build_relay_webhook_payload(
            name=self._webhook_name,
            target_url=target_url,
            domain=domain,
            auth_token=self._webhook_auth_token,
        )
        result = await self._call("POST", RELAY_WEBHOOKS_PATH, payload)
        if result.ok:
            logger.info("inbound_webhook_created", extra={"domain": domain, "target": target_url})
        return result

    async def create_inbound_domain(self, domain: str) -> ProviderResult:
        """Registra o domínio como elegível para relay inbound."""
        result = await self._call(
            "POST",
            INBOUND_DOMAINS_PATH,
            build_inbound_domain_payload(domain),
        )
        if result.ok:
            logger.info("inbound_domain_created", extra={"domain": domain})
        return result

    async def send_transmission(self, recipient_email: str, raw_email: str) -> ProviderResult:
        """Envia o RFC 822 bruto para o destinatário."""
        payload = build_transmission_payload(
            TransmissionRequest(recipient_email=recipient_email, email_rfc822=raw_email)
        )
        return await self._call("POST", TRANSMISSIONS_PATH, payload)

    async def _call(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> ProviderResult:
        """Executa a chamada e converte em resultado de duas variantes."""
        try:
            response = await self.request(method, path, json=payload)
        except HttpError as exc:
            return ProviderFailure(status_code=None, body=str(exc))

        if response.status_code != 200:
            self._log_failure(method, path, response)
            return ProviderFailure(status_code=response.status_code, body=response.text)

        # JSONDecodeError e UnicodeDecodeError (corpo não-UTF-8) são ValueError
        try:
            body = response.json()
        except ValueError:
            logger.error(
                "sparkpost_unexpected_response",
                extra={"method": method, "path": path, "reason": "invalid_json"},
            )
            return ProviderFailure(status_code=response.status_code, body=response.text)

        logger.debug(
            "sparkpost_call_succeeded",
            extra={"method": method, "path": path, "status_code": response.status_code},
        )
        return ProviderOk(status_code=response.status_code, body=body)

    @staticmethod
    def _log_failure(method: str, path: str, response: httpx.Response) -> None:
        errors = parse_sparkpost_errors(response.text)
        logger.warning(
            "sparkpost_call_rejected",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "error_messages": [error.message for error in errors],
                "error_codes": [error.code for error in errors],
            },
        )


def create_sparkpost_http_client(
    settings: SparkPostSettings | None = None,
) -> SparkPostHttpClient:
    """Factory do cliente SparkPost com AsyncClient próprio.

    Args:
        settings: SparkPostSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_sparkpost_settings

    sparkpost = settings or get_sparkpost_settings()
    config = HttpClientConfig(
        base_url=sparkpost.base_url,
        timeout_seconds=sparkpost.request_timeout_seconds,
        default_headers={"Authorization": sparkpost.api_key},
    )
    return SparkPostHttpClient(
        config.build_async_client(),
        webhook_name=sparkpost.webhook_name,
        webhook_auth_token=sparkpost.webhook_auth_token,
    )

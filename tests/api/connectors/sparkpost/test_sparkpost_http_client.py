"""Testes do SparkPostHttpClient com AsyncClient mockado."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from api.connectors.sparkpost import SparkPostHttpClient, create_sparkpost_http_client
from app.protocols.models import ProviderFailure, ProviderOk, WebhookRegistration
from config.settings import SparkPostSettings


def _client(
    *responses: httpx.Response | Exception,
    auth_token: str = "",
) -> tuple[SparkPostHttpClient, MagicMock]:
    http_client = MagicMock(spec=httpx.AsyncClient)
    http_client.request = AsyncMock(side_effect=list(responses))
    client = SparkPostHttpClient(
        http_client,
        webhook_name="Forwarding Service",
        webhook_auth_token=auth_token,
    )
    return client, http_client


def _sent_json(http_client: MagicMock) -> Any:
    return http_client.request.call_args.kwargs["json"]


class TestSendTransmission:
    @pytest.mark.asyncio
    async def test_success_on_200(self) -> None:
        client, http_client = _client(httpx.Response(200, json={"results": {"id": "tx-1"}}))

        result = await client.send_transmission("inbox@example.com", "From: svc@relay.test\n\nhi")

        assert isinstance(result, ProviderOk)
        assert result.body == {"results": {"id": "tx-1"}}
        args = http_client.request.call_args
        assert args.args == ("POST", "transmissions")
        assert _sent_json(http_client) == {
            "recipients": [{"address": {"email": "inbox@example.com"}}],
            "content": {"email_rfc822": "From: svc@relay.test\n\nhi"},
        }
        assert args.kwargs["headers"]["Content-Type"] == "application/json"

    @pytest.mark.asyncio
    async def test_non_200_is_failure_with_raw_body(self) -> None:
        body = {"errors": [{"message": "Unauthorized.", "code": "1000"}]}
        client, _ = _client(httpx.Response(401, json=body))

        result = await client.send_transmission("inbox@example.com", "raw")

        assert isinstance(result, ProviderFailure)
        assert result.status_code == 401
        assert json.loads(result.body) == body
        assert result.describe().startswith("401 ")

    @pytest.mark.asyncio
    async def test_other_2xx_is_failure(self) -> None:
        """Somente 200 conta como sucesso."""
        client, _ = _client(httpx.Response(202, text="accepted"))

        result = await client.send_transmission("inbox@example.com", "raw")

        assert result == ProviderFailure(status_code=202, body="accepted")

    @pytest.mark.asyncio
    async def test_transport_error_is_failure_without_status(self) -> None:
        client, http_client = _client(httpx.ConnectError("connection refused"))

        result = await client.send_transmission("inbox@example.com", "raw")

        assert isinstance(result, ProviderFailure)
        assert result.status_code is None
        assert "connection refused" in result.body
        http_client.request.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_json_on_200_is_failure(self) -> None:
        client, _ = _client(httpx.Response(200, text="<html>"))

        result = await client.send_transmission("inbox@example.com", "raw")

        assert result == ProviderFailure(status_code=200, body="<html>")

    @pytest.mark.asyncio
    async def test_non_utf8_body_on_200_is_failure(self) -> None:
        client, _ = _client(httpx.Response(200, content=b'{"results": "\xff\xfe\xfd"}'))

        result = await client.create_inbound_domain("mail.relay.test")

        assert isinstance(result, ProviderFailure)
        assert result.status_code == 200


class TestRelayWebhooks:
    @pytest.mark.asyncio
    async def test_list_parses_registrations_in_order(self) -> None:
        body = {
            "results": [
                {
                    "name": "Other",
                    "target": "https://other.test/message",
                    "match": {"protocol": "SMTP", "domain": "other.test"},
                },
                {
                    "name": "Forwarding Service",
                    "target": "https://relay.test/message",
                    "match": {"protocol": "SMTP", "domain": "mail.relay.test"},
                },
            ]
        }
        client, http_client = _client(httpx.Response(200, json=body))

        result = await client.list_inbound_webhooks()

        assert result == [
            WebhookRegistration(
                target="https://other.test/message", domain="other.test", name="Other"
            ),
            WebhookRegistration(
                target="https://relay.test/message",
                domain="mail.relay.test",
                name="Forwarding Service",
            ),
        ]
        assert http_client.request.call_args.args == ("GET", "relay-webhooks")
        assert http_client.request.call_args.kwargs["headers"] is None

    @pytest.mark.asyncio
    async def test_list_failure_is_propagated(self) -> None:
        client, _ = _client(httpx.Response(500, text="boom"))

        result = await client.list_inbound_webhooks()

        assert result == ProviderFailure(status_code=500, body="boom")

    @pytest.mark.asyncio
    async def test_list_without_results_is_failure(self) -> None:
        client, _ = _client(httpx.Response(200, json={"unexpected": True}))

        result = await client.list_inbound_webhooks()

        assert isinstance(result, ProviderFailure)
        assert result.status_code == 200

    @pytest.mark.asyncio
    async def test_create_webhook_payload(self) -> None:
        client, http_client = _client(
            httpx.Response(200, json={"results": {"id": "wh-1"}}),
            auth_token="secret-token",
        )

        result = await client.create_inbound_webhook(
            "https://relay.test/message", "mail.relay.test"
        )

        assert result.ok is True
        assert http_client.request.call_args.args == ("POST", "relay-webhooks")
        assert _sent_json(http_client) == {
            "name": "Forwarding Service",
            "target": "https://relay.test/message",
            "auth_token": "secret-token",
            "match": {"protocol": "SMTP", "domain": "mail.relay.test"},
        }

    @pytest.mark.asyncio
    async def test_create_webhook_omits_empty_auth_token(self) -> None:
        client, http_client = _client(httpx.Response(200, json={"results": {}}))

        await client.create_inbound_webhook("https://relay.test/message", "mail.relay.test")

        assert "auth_token" not in _sent_json(http_client)


class TestInboundDomains:
    @pytest.mark.asyncio
    async def test_create_domain_payload(self) -> None:
        client, http_client = _client(httpx.Response(200, json={"results": {}}))

        result = await client.create_inbound_domain("mail.relay.test")

        assert isinstance(result, ProviderOk)
        assert http_client.request.call_args.args == ("POST", "inbound-domains")
        assert _sent_json(http_client) == {"domain": "mail.relay.test"}

    @pytest.mark.asyncio
    async def test_create_domain_conflict(self) -> None:
        client, _ = _client(httpx.Response(409, text='{"errors":[{"message":"exists"}]}'))

        result = await client.create_inbound_domain("mail.relay.test")

        assert result.describe() == '409 {"errors":[{"message":"exists"}]}'


class TestFactory:
    @pytest.mark.asyncio
    async def test_factory_configures_auth_and_base_url(self) -> None:
        settings = SparkPostSettings(
            api_url="https://api.sparkpost.test/api/v1",
            api_key="my-key",
            request_timeout_seconds=7.5,
        )

        client = create_sparkpost_http_client(settings)
        try:
            inner = client._http
            assert str(inner.base_url) == "https://api.sparkpost.test/api/v1/"
            assert inner.headers["Authorization"] == "my-key"
            assert inner.timeout.read == 7.5
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_factory_without_timeout_is_unbounded(self) -> None:
        settings = SparkPostSettings(api_url="https://api.sparkpost.test/api/v1", api_key="k")

        client = create_sparkpost_http_client(settings)
        try:
            assert client._http.timeout.read is None
        finally:
            await client.aclose()

"""Recebimento de relay webhooks SparkPost."""

from .receive import InvalidJsonError, WebhookRequestError, parse_relay_webhook_request

__all__ = [
    "InvalidJsonError",
    "WebhookRequestError",
    "parse_relay_webhook_request",
]

"""Conector da API SparkPost (transmissões e relay inbound)."""

from .http_client import SparkPostHttpClient, create_sparkpost_http_client

__all__ = [
    "SparkPostHttpClient",
    "create_sparkpost_http_client",
]

"""Connectors — adapters de borda para APIs externas.

Estrutura:
- sparkpost/: API REST do SparkPost (transmissions, relay webhooks, inbound domains)
"""

__all__: list[str] = []

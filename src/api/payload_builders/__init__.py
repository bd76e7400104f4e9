"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- sparkpost/: transmissions, relay-webhooks e inbound-domains
"""

__all__: list[str] = []

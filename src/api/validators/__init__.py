"""Validators de entrada HTTP.

Estrutura:
- provisioning/: corpos dos endpoints /inbound-webhook e /inbound-domain
"""

__all__: list[str] = []

"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook de relay, provisionamento, health)
- Validação inicial do corpo da requisição
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/relay/: /message, /inbound-webhook, /inbound-domain
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

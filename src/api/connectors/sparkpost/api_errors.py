"""Erros e helpers de parsing para a API SparkPost."""

from __future__ import annotations

import json
from dataclasses import dataclass


@dataclass(frozen=True)
class SparkPostApiError:
    """Item de `errors` retornado pela API SparkPost."""

    message: str
    code: str = ""
    description: str = ""


def parse_sparkpost_errors(raw_body: str) -> list[SparkPostApiError]:
    """Extrai a lista `errors` do corpo da resposta.

    Corpo não-JSON ou sem `errors` retorna lista vazia; o texto bruto
    continua disponível no ProviderFailure para diagnóstico.
    """
    try:
        data = json.loads(raw_body)
    except (TypeError, ValueError):
        return []

    if not isinstance(data, dict):
        return []

    errors = data.get("errors")
    if not isinstance(errors, list):
        return []

    return [
        SparkPostApiError(
            message=str(item.get("message", "Erro desconhecido")),
            code=str(item.get("code", "")),
            description=str(item.get("description", "")),
        )
        for item in errors
        if isinstance(item, dict)
    ]

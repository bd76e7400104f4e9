"""Settings do encaminhamento de emails.

Endereços fixos usados na reescrita do remetente e na retransmissão.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do relay.

    Attributes:
        forward_from: Endereço que substitui o header From: (domínio verificado)
        forward_to: Destinatário único de todas as mensagens encaminhadas
        app_url_scheme: Esquema usado ao montar a URL pública de /message
    """

    forward_from: str = ""
    forward_to: str = ""
    app_url_scheme: str = "https"

    def build_app_url(self, hostname: str) -> str:
        """Monta a URL pública do endpoint /message para o host informado."""
        return f"{self.app_url_scheme}://{hostname}/message"

    def validate(self) -> list[str]:
        errors: list[str] = []

        if not self.forward_from:
            errors.append("FORWARD_FROM não configurado")

        if not self.forward_to:
            errors.append("FORWARD_TO não configurado")

        if self.app_url_scheme not in ("http", "https"):
            errors.append("RELAY_APP_URL_SCHEME deve ser 'http' ou 'https'")

        return errors


def _load_from_env() -> RelaySettings:
    """Carrega RelaySettings a partir de variáveis de ambiente."""
    return RelaySettings(
        forward_from=os.getenv("FORWARD_FROM", ""),
        forward_to=os.getenv("FORWARD_TO", ""),
        app_url_scheme=os.getenv("RELAY_APP_URL_SCHEME", "https").lower(),
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()

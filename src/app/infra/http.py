"""Cliente HTTP base para chamadas ao provedor externo.

Envolve um `httpx.AsyncClient` de escopo de processo (criado no startup,
fechado no shutdown). Não há retries: cada chamada é uma tentativa única.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str = ""
    timeout_seconds: float | None = None
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True

    def build_async_client(self) -> httpx.AsyncClient:
        """Cria o AsyncClient compartilhado com base URL, headers e timeout."""
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.default_headers,
            timeout=httpx.Timeout(self.timeout_seconds),
            verify=self.verify_ssl,
        )


class HttpError(Exception):
    """Falha de transporte (sem resposta HTTP)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class HttpClient:
    """Cliente HTTP simples para chamadas externas."""

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http = http_client

    async def request(
        self,
        method: str,
        path: str,
        json: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """Executa a requisição relativa à base URL do cliente.

        Raises:
            HttpError: Se não houve resposta (conexão, DNS, timeout).
        """
        headers = {"Content-Type": "application/json"} if json is not None else None
        try:
            return await self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": method, "path": path, "error_type": type(exc).__name__},
            )
            raise HttpError(f"{type(exc).__name__}: {exc}") from exc

    async def aclose(self) -> None:
        await self._http.aclose()

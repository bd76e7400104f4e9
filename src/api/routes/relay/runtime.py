"""Acesso às dependências de processo a partir da requisição."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from app.bootstrap.dependencies import RelayDependencies


def get_relay_dependencies(request: Request) -> RelayDependencies:
    """Retorna as dependências criadas no lifespan (app.state.relay).

    Raises:
        RuntimeError: Se a aplicação não passou pelo startup.
    """
    deps = getattr(request.app.state, "relay", None)
    if deps is None:
        raise RuntimeError("Dependências do relay não inicializadas")
    return deps


def request_hostname(request: Request) -> str:
    """Host da requisição sem porta, como visto pelo provedor."""
    return request.url.hostname or ""

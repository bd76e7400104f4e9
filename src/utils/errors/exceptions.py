"""Exceções compartilhadas do relay (infraestrutura, configuração e payload)."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class RedisConnectionError(InfrastructureError):
    """Falha de conexão/timeout ao acessar Redis."""


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida no startup."""

    def __init__(self, environment: str, errors: list[str]) -> None:
        details = "\n".join(f"- {error}" for error in errors)
        super().__init__(f"Configuração inválida para {environment}:\n{details}")
        self.environment = environment
        self.errors = errors


class InvalidRelayPayloadError(ValueError):
    """Payload recebido (webhook ou provisionamento) mal-formado."""

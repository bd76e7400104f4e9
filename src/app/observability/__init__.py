"""Observabilidade — correlation_id das requisições HTTP do relay.

Uso:
    from app.observability import CORRELATION_HEADER, correlation_scope
"""

from app.observability.correlation import (
    CORRELATION_HEADER,
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

__all__ = [
    "CORRELATION_HEADER",
    "correlation_scope",
    "generate_correlation_id",
    "get_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]

"""Validação dos corpos JSON dos endpoints de provisionamento."""

from api.validators.provisioning.domain import parse_domain_request

__all__ = ["parse_domain_request"]

"""Normalizers — conversão de payloads externos para dados internos.

Estrutura:
- relay/: email RFC 822 bruto do relay webhook SparkPost
"""

from .relay import extract_raw_email

__all__ = ["extract_raw_email"]

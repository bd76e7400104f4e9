"""Normalizer de relay webhooks SparkPost (msys.relay_message)."""

from .extractor import extract_raw_email

__all__ = ["extract_raw_email"]

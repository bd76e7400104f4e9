"""Testes do correlation_id por requisição."""

from __future__ import annotations

import pytest

from app.observability import correlation_scope, get_correlation_id
from app.observability.correlation import MAX_CORRELATION_ID_LENGTH, normalize_correlation_id


def test_scope_binds_incoming_id_and_restores() -> None:
    with correlation_scope("corr-1") as correlation_id:
        assert correlation_id == "corr-1"
        assert get_correlation_id() == "corr-1"

    assert get_correlation_id() == ""


def test_nested_scopes_restore_outer_id() -> None:
    with correlation_scope("outer"):
        with correlation_scope("inner"):
            assert get_correlation_id() == "inner"
        assert get_correlation_id() == "outer"


def test_scope_restores_on_exception() -> None:
    with pytest.raises(RuntimeError), correlation_scope("boom"):
        raise RuntimeError("falhou")

    assert get_correlation_id() == ""


@pytest.mark.parametrize(
    "incoming",
    [None, "", "   ", "x" * (MAX_CORRELATION_ID_LENGTH + 1), "bad\nid"],
)
def test_missing_or_unusable_header_generates_id(incoming: str | None) -> None:
    generated = normalize_correlation_id(incoming)

    assert generated != incoming
    assert len(generated) == 36


def test_header_value_is_stripped() -> None:
    assert normalize_correlation_id("  corr-7 ") == "corr-7"

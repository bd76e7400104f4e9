"""Testes da reescrita do header From:."""

from __future__ import annotations

from app.domain.relay_message import rewrite_from_header

FORWARD_FROM = "svc@relay.test"


def test_rewrites_from_line() -> None:
    raw = "From: a@b.com\nSubject: x\n\nbody"

    assert rewrite_from_header(raw, FORWARD_FROM) == "From: svc@relay.test\nSubject: x\n\nbody"


def test_preserves_crlf_terminators() -> None:
    raw = "Subject: hi\r\nFrom: \"Alice\" <alice@example.com>\r\nTo: x@y\r\n\r\nbody\r\n"

    result = rewrite_from_header(raw, FORWARD_FROM)

    assert result == "Subject: hi\r\nFrom: svc@relay.test\r\nTo: x@y\r\n\r\nbody\r\n"


def test_only_first_from_line_is_rewritten() -> None:
    raw = "From: a@b.com\nSubject: x\n\nFrom: quoted in body\n"

    result = rewrite_from_header(raw, FORWARD_FROM)

    assert result == "From: svc@relay.test\nSubject: x\n\nFrom: quoted in body\n"


def test_message_without_from_is_unchanged() -> None:
    raw = "Subject: x\nTo: y@z\n\nbody"

    assert rewrite_from_header(raw, FORWARD_FROM) == raw


def test_header_match_is_case_sensitive() -> None:
    raw = "FROM: a@b.com\nfrom: c@d.com\n\nbody"

    assert rewrite_from_header(raw, FORWARD_FROM) == raw


def test_replacement_is_literal() -> None:
    """Endereço com barras invertidas não é interpretado como grupo."""
    result = rewrite_from_header("From: a@b.com\n", r"weird\1@relay.test")

    assert result == "From: weird\\1@relay.test\n"

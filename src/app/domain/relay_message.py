"""RelayMessage — email RFC 822 com o remetente já reescrito.

É a única unidade publicada na fila de relay: uma string, sem id e sem
metadados. A reescrita acontece antes da publicação.
"""

from __future__ import annotations

import re

# Primeira linha iniciando por "From: "; preserva o terminador (\r\n ou \n)
FROM_HEADER_PATTERN = re.compile(r"^From: [^\r\n]*", re.MULTILINE)


def rewrite_from_header(raw_email: str, forward_from: str) -> str:
    """Substitui a primeira linha `From: ...` por `From: <forward_from>`.

    Demais headers e corpo permanecem inalterados. Sem linha From: o texto
    é devolvido como veio.
    """
    replacement = f"From: {forward_from}"
    return FROM_HEADER_PATTERN.sub(lambda _match: replacement, raw_email, count=1)

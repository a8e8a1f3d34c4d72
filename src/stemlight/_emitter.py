"""Turn tokens plus selected spans into content/start/end records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._types import Content, End, Start

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._types import MatchInfo, OutputToken, Token


def emit_tokens(
    tokens: Sequence[Token], spans: Sequence[MatchInfo]
) -> list[OutputToken]:
    """Walk tokens in order, bracketing each span with Start/End records."""
    by_start = {s.start: s for s in spans}
    out: list[OutputToken] = []
    i = 0
    n = len(tokens)
    while i < n:
        span = by_start.get(i)
        if span is None:
            out.append(Content(tokens[i].segment))
            i += 1
            continue
        out.append(Start(span))
        for tok in tokens[span.start:span.end + 1]:
            out.append(Content(tok.segment))
        out.append(End(span))
        i = span.end + 1
    return out

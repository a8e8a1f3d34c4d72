"""Single forward pass producing raw keyword match candidates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._types import MatchCandidate, PartialMatch

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ._linguistics import LinguisticService
    from ._types import CompiledKeyword, Token

logger = logging.getLogger(__name__)

# Clause boundaries a multi-word match may not cross. Hyphens, dashes and
# ampersands are not delimiters.
PHRASE_DELIMITERS: frozenset[str] = frozenset("\r\n.,:;。，、：；()[]（）【】")


class StreamMatcher:
    """Advances in-flight partial matches token by token.

    Remaining stems of a partial match form an unordered bag, so the words
    of a multi-word keyword may appear in any order within one clause.
    """

    __slots__ = ("_by_stem", "_linguistics")

    def __init__(
        self,
        keywords: Sequence[CompiledKeyword],
        linguistics: LinguisticService,
    ) -> None:
        self._linguistics = linguistics
        self._by_stem: dict[str, list[CompiledKeyword]] = {}
        for kw in keywords:
            for stem in dict.fromkeys(kw.required):
                self._by_stem.setdefault(stem, []).append(kw)

    def within_boundary(self, exact: str) -> bool:
        """True if text stays inside one sentence and one phrase."""
        if any(ch in PHRASE_DELIMITERS for ch in exact):
            return False
        return len(self._linguistics.segment(exact, "sentence")) <= 1

    def advance(
        self,
        partials: list[PartialMatch],
        tokens: Sequence[Token],
        index: int,
        candidates: list[MatchCandidate],
    ) -> list[PartialMatch]:
        """Consume ``tokens[index]`` and return the new live partial list.

        Completed matches are appended to ``candidates``. The incoming list is
        not modified.
        """
        stem = tokens[index].stem
        if stem is None:
            return partials

        live: list[PartialMatch] = []
        for partial in partials:
            if stem not in partial.remaining:
                continue
            partial.remaining.remove(stem)
            if partial.remaining:
                live.append(partial)
                continue
            # Complete: dropped from the live list whether or not it passes.
            exact = "".join(t.segment for t in tokens[partial.start:index + 1])
            if self.within_boundary(exact):
                candidates.append(MatchCandidate(
                    start=partial.start, end=index,
                    matched=partial.keyword, exact=exact,
                ))
            else:
                logger.debug(
                    "Discarding %r for %r: crosses a phrase boundary",
                    exact, partial.keyword,
                )

        for kw in self._by_stem.get(stem, ()):
            remaining = list(kw.required)
            remaining.remove(stem)
            if remaining:
                live.append(PartialMatch(index, remaining, kw.text))
            else:
                candidates.append(MatchCandidate(
                    start=index, end=index,
                    matched=kw.text, exact=tokens[index].segment,
                ))

        return live

    def scan(self, tokens: Sequence[Token]) -> list[MatchCandidate]:
        """Run one pass over ``tokens`` and return every candidate found."""
        candidates: list[MatchCandidate] = []
        if not self._by_stem:
            return candidates
        partials: list[PartialMatch] = []
        for i in range(len(tokens)):
            partials = self.advance(partials, tokens, i, candidates)
        return candidates

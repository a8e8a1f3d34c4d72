"""Stop-word aware tokenize/normalize pipeline and keyword compilation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._normalize import to_normalized_stem
from ._types import CompiledKeyword, Token

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._linguistics import LinguisticService


def edge_words(
    keywords: Iterable[str], linguistics: LinguisticService
) -> set[str]:
    """First and last word-like segment of every keyword."""
    edges: set[str] = set()
    for keyword in keywords:
        segs = [s.segment for s in linguistics.segment(keyword, "word")
                if s.is_word_like]
        if segs:
            edges.add(segs[0])
            edges.add(segs[-1])
    return edges


class Tokenizer:
    __slots__ = ("_linguistics", "_suppressed")

    def __init__(
        self,
        linguistics: LinguisticService,
        edge_words: Iterable[str] = (),
    ) -> None:
        self._linguistics = linguistics
        exempt = {to_normalized_stem(w, linguistics) for w in edge_words}
        self._suppressed = frozenset(
            stem
            for stem in (
                to_normalized_stem(w, linguistics)
                for w in linguistics.stop_words()
            )
            if stem not in exempt
        )

    @property
    def linguistics(self) -> LinguisticService:
        return self._linguistics

    def is_suppressed(self, stem: str) -> bool:
        """True if text tokens with this stem are inert during matching."""
        return stem in self._suppressed

    def stem(self, word: str) -> str | None:
        """Normalized stem of a word-like segment, or None if it is empty."""
        return to_normalized_stem(word, self._linguistics) or None

    def tokenize(self, text: str) -> tuple[Token, ...]:
        """Split text into tokens, nulling non-words and stop words.

        Concatenating the segments of the result gives back ``text``.
        """
        tokens: list[Token] = []
        for seg in self._linguistics.segment(text, "word"):
            stem = self.stem(seg.segment) if seg.is_word_like else None
            if stem is not None and stem in self._suppressed:
                stem = None
            tokens.append(Token(seg.segment, stem))
        return tuple(tokens)


class KeywordCompiler:
    """Turns keyword phrases into stem bags with the tokenizer's pipeline."""

    __slots__ = ("_tokenizer",)

    def __init__(self, tokenizer: Tokenizer) -> None:
        self._tokenizer = tokenizer

    def compile(self, keyword: str) -> CompiledKeyword:
        tokenizer = self._tokenizer
        stems: list[Token] = []
        for seg in tokenizer.linguistics.segment(keyword, "word"):
            stem = tokenizer.stem(seg.segment) if seg.is_word_like else None
            stems.append(Token(seg.segment, stem))
        # Suppressed text tokens are inert, so they can never satisfy a stem.
        required = tuple(
            t.stem for t in stems
            if t.stem is not None and not tokenizer.is_suppressed(t.stem)
        )
        return CompiledKeyword(keyword, tuple(stems), required)

    def compile_all(self, keywords: Iterable[str]) -> list[CompiledKeyword]:
        """Compile unique, non-blank keywords in a stable order."""
        unique = sorted({k for k in keywords if k.strip()})
        return [self.compile(k) for k in unique]

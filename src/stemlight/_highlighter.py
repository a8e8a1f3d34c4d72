"""Matcher: compiled keywords for one locale, reusable across texts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ._emitter import emit_tokens
from ._errors import TransformError
from ._matcher import StreamMatcher
from ._resolver import resolve_overlaps
from ._tokenizer import KeywordCompiler, Tokenizer, edge_words
from ._transforms import Transforms
from ._types import Content, Start

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping

    from ._linguistics import LinguisticService
    from ._types import CompiledKeyword, MatchInfo, OutputToken, Token

logger = logging.getLogger(__name__)


class Matcher:
    """Finds keyword phrases by stem and marks non-overlapping matches.

    Build one per keyword set and locale, then call ``match``, ``spans`` or
    ``wrap`` for each text. Pass the same ``counts`` mapping to several
    calls to keep occurrence numbering going across them.
    """

    __slots__ = (
        "_linguistics", "_tokenizer", "_keywords", "_stream", "_transforms",
    )

    def __init__(
        self,
        keywords: Iterable[str],
        linguistics: LinguisticService,
        transforms: Transforms | dict[str, Any] | None = None,
    ) -> None:
        keywords = list(keywords)
        self._transforms = (
            None if transforms is None else Transforms.coerce(transforms)
        )
        self._linguistics = linguistics
        self._tokenizer = Tokenizer(
            linguistics, edge_words(keywords, linguistics),
        )
        self._keywords = KeywordCompiler(self._tokenizer).compile_all(keywords)
        self._stream = StreamMatcher(self._keywords, linguistics)
        logger.debug(
            "Compiled %d keywords for language %r",
            len(self._keywords), linguistics.language,
        )

    @property
    def keywords(self) -> list[CompiledKeyword]:
        return list(self._keywords)

    @property
    def linguistics(self) -> LinguisticService:
        return self._linguistics

    def spans(
        self, text: str, counts: MutableMapping[str, int] | None = None
    ) -> list[MatchInfo]:
        """Selected matches in ``text``, sorted by position."""
        _, spans = self._run(text, counts)
        return spans

    def match(
        self, text: str, counts: MutableMapping[str, int] | None = None
    ) -> list[OutputToken]:
        """Content/Start/End records for ``text``.

        Concatenating the ``Content`` records reproduces ``text``.
        """
        tokens, spans = self._run(text, counts)
        return emit_tokens(tokens, spans)

    def wrap(
        self, text: str, counts: MutableMapping[str, int] | None = None
    ) -> str:
        """Render ``text`` with every match wrapped by the transforms."""
        if self._transforms is None:
            raise TransformError("wrap() requires transforms")
        fns = self._transforms
        parts: list[str] = []
        for tok in self.match(text, counts):
            if isinstance(tok, Content):
                parts.append(fns.content(tok.text))
            elif isinstance(tok, Start):
                parts.append(fns.start_tag(tok.meta))
            else:
                parts.append(fns.end_tag(tok.meta))
        return "".join(parts)

    __call__ = wrap

    def _run(
        self, text: str, counts: MutableMapping[str, int] | None
    ) -> tuple[tuple[Token, ...], list[MatchInfo]]:
        tokens = self._tokenizer.tokenize(text)
        candidates = self._stream.scan(tokens)
        spans = resolve_overlaps(
            candidates, counts, language=self._linguistics.language,
        )
        return tokens, spans

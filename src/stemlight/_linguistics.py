"""Per-locale stemming, segmentation and stop words."""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Literal, Protocol

import icu
import regex
import Stemmer
from uniseg.sentencebreak import sentences

from ._stop_words import STOP_WORDS
from ._types import Segment

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

Granularity = Literal["word", "sentence"]

# ISO 639-1 language subtag -> Snowball algorithm name
SNOWBALL_ALGORITHMS: dict[str, str] = {
    "ar": "arabic",
    "ca": "catalan",
    "da": "danish",
    "de": "german",
    "el": "greek",
    "en": "english",
    "es": "spanish",
    "eu": "basque",
    "fi": "finnish",
    "fr": "french",
    "ga": "irish",
    "hi": "hindi",
    "hu": "hungarian",
    "hy": "armenian",
    "id": "indonesian",
    "it": "italian",
    "lt": "lithuanian",
    "nb": "norwegian",
    "ne": "nepali",
    "nl": "dutch",
    "nn": "norwegian",
    "no": "norwegian",
    "pt": "portuguese",
    "ro": "romanian",
    "ru": "russian",
    "sr": "serbian",
    "sv": "swedish",
    "ta": "tamil",
    "tr": "turkish",
    "yi": "yiddish",
}

_WORD_LIKE_RE = regex.compile(r"[\p{L}\p{N}]")

# ICU word rule statuses below this mark spaces and punctuation
_WORD_STATUS_NONE_LIMIT = 100


class LinguisticService(Protocol):
    """What the matcher needs from a locale."""

    language: str

    def stem_word(self, word: str) -> str: ...

    def segment(
        self, text: str, granularity: Granularity = "word"
    ) -> list[Segment]: ...

    def stop_words(self) -> Sequence[str]: ...


def language_of(locale: str) -> str:
    """Return the lower-cased language subtag of a locale identifier."""
    return locale.replace("_", "-").split("-", 1)[0].strip().lower()


def is_word_like(segment: str) -> bool:
    return _WORD_LIKE_RE.search(segment) is not None


class DefaultLinguistics:
    """Snowball stemming, ICU word breaks and bundled stop words.

    Words come from the ICU word break iterator for the locale, which uses
    dictionaries for scripts written without spaces (Chinese, Japanese,
    Thai). Sentences use UAX #29 rules. Unsupported languages fall back to
    identity stemming and no stop words. Stemmer and break iterator objects
    are not thread-safe; use one instance per thread.
    """

    __slots__ = ("locale", "language", "_stemmer", "_word_breaker")

    def __init__(self, locale: str) -> None:
        self.locale = locale
        self.language = language_of(locale)
        self._word_breaker = icu.BreakIterator.createWordInstance(
            icu.Locale.forLanguageTag(locale.replace("_", "-")),
        )
        algorithm = SNOWBALL_ALGORITHMS.get(self.language)
        if algorithm is not None and algorithm in Stemmer.algorithms():
            self._stemmer = Stemmer.Stemmer(algorithm)
        else:
            logger.debug(
                "No stemmer for locale %r, using identity stemming", locale,
            )
            self._stemmer = None

    def stem_word(self, word: str) -> str:
        if self._stemmer is None:
            return word
        return self._stemmer.stemWord(word)

    def segment(
        self, text: str, granularity: Granularity = "word"
    ) -> list[Segment]:
        """Split text into ordered segments covering it entirely."""
        if granularity == "word":
            return self._words(text)
        if granularity == "sentence":
            return [Segment(p, is_word_like(p)) for p in sentences(text)]
        raise ValueError(f"unknown granularity {granularity!r}")

    def _words(self, text: str) -> list[Segment]:
        # ICU offsets count UTF-16 code units, so slice the UnicodeString
        ustr = icu.UnicodeString(text)
        breaker = self._word_breaker
        breaker.setText(ustr)
        segments: list[Segment] = []
        start = breaker.first()
        for end in breaker:
            segments.append(Segment(
                str(ustr[start:end]),
                breaker.getRuleStatus() >= _WORD_STATUS_NONE_LIMIT,
            ))
            start = end
        return segments

    def stop_words(self) -> Sequence[str]:
        table = STOP_WORDS.get(self.language)
        if table is None:
            logger.debug("No stop words for language %r", self.language)
            return ()
        return table

    def __repr__(self) -> str:
        return f"DefaultLinguistics({self.locale!r})"


@functools.lru_cache(maxsize=None)
def load_linguistics(locale: str = "en") -> DefaultLinguistics:
    """Return the shared DefaultLinguistics for a locale."""
    return DefaultLinguistics(locale)

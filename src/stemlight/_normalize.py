"""Text normalization shared by tokenization, keyword compilation and ranking."""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

import regex

if TYPE_CHECKING:
    from ._linguistics import LinguisticService

_NON_WORD_RUN_RE = regex.compile(r"[^\p{L}\p{M}\p{N}]+")
_MARKS_RE = regex.compile(r"\p{M}+")

# Languages whose dotted/dotless I pairs differ from the default case mapping.
_DOTLESS_I_LANGUAGES = frozenset({"tr", "az"})


def fold_case(text: str, language: str = "") -> str:
    """Lower-case text using the rules of the given language subtag."""
    if language in _DOTLESS_I_LANGUAGES:
        text = text.replace("I", "ı").replace("İ", "i")
    return text.lower()


def normalize_subtle(text: str, language: str = "") -> str:
    """Normalize without stemming.

    Collapses runs of anything that is not a letter, mark or number into a
    single space, folds case, then strips combining marks after NFKD.
    """
    text = _NON_WORD_RUN_RE.sub(" ", text).strip()
    text = unicodedata.normalize("NFKD", fold_case(text, language))
    return _MARKS_RE.sub("", text)


def to_normalized_stem(word: str, linguistics: LinguisticService) -> str:
    """Stem a word and normalize the result.

    Marks are stripped after stemming: Snowball algorithms rely on accented
    letters to find suffixes.
    """
    language = linguistics.language
    return normalize_subtle(
        linguistics.stem_word(fold_case(word, language)), language,
    )

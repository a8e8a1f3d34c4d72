"""Stemlight: find keyword phrases by stem and wrap them in markers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ._errors import StemlightError, TransformError
from ._highlighter import Matcher
from ._linguistics import DefaultLinguistics, LinguisticService, load_linguistics
from ._stop_words import STOP_WORDS
from ._transforms import Transforms, html_transforms, wrappers_to_transforms
from ._types import (
    CompiledKeyword,
    Content,
    End,
    MatchInfo,
    OutputToken,
    Segment,
    Start,
    Token,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "create_matcher",
    "highlight",
    "CompiledKeyword",
    "Content",
    "DefaultLinguistics",
    "End",
    "LinguisticService",
    "MatchInfo",
    "Matcher",
    "OutputToken",
    "Segment",
    "Start",
    "StemlightError",
    "STOP_WORDS",
    "Token",
    "TransformError",
    "Transforms",
    "html_transforms",
    "load_linguistics",
    "wrappers_to_transforms",
]


def create_matcher(
    keywords: Iterable[str],
    locale: str = "en",
    transforms: Transforms | dict[str, Any] | None = None,
    *,
    linguistics: LinguisticService | None = None,
) -> Matcher:
    """Compile keywords for a locale and return a reusable Matcher.

    Args:
        keywords: Keyword phrases. Duplicates and blank entries are ignored.
        locale: BCP 47 locale such as ``"en-US"``. Unsupported languages
            match on unstemmed words.
        transforms: Markers used by ``Matcher.wrap``.
        linguistics: Overrides stemming, segmentation and stop words.
    """
    if linguistics is None:
        linguistics = load_linguistics(locale)
    return Matcher(keywords, linguistics, transforms)


def highlight(
    text: str,
    keywords: Iterable[str],
    locale: str = "en",
    transforms: Transforms | dict[str, Any] | None = None,
    counts: MutableMapping[str, int] | None = None,
) -> str:
    """Wrap keyword matches in ``text`` in one call.

    Defaults to ``[``/``]`` markers when no transforms are given.
    """
    if transforms is None:
        transforms = Transforms("[", "]")
    return create_matcher(keywords, locale, transforms).wrap(text, counts)

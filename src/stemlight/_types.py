"""Data structures for stemlight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(slots=True, frozen=True)
class Segment:
    segment: str
    is_word_like: bool


@dataclass(slots=True, frozen=True)
class Token:
    segment: str
    stem: str | None   # None for non-words and suppressed stop words


@dataclass(slots=True, frozen=True)
class CompiledKeyword:
    text: str
    stems: tuple[Token, ...]    # every segment of the phrase, in order
    required: tuple[str, ...]   # stems a match must consume, any order


@dataclass(slots=True)
class PartialMatch:
    start: int
    remaining: list[str]
    keyword: str


@dataclass(slots=True, frozen=True)
class MatchCandidate:
    start: int
    end: int        # inclusive
    matched: str    # keyword text
    exact: str      # text as it appears in the input


@dataclass(slots=True, frozen=True)
class MatchInfo:
    """A selected span.

    Attributes:
        start: Index of the first covered token.
        end: Index of the last covered token (inclusive).
        exact: The exact text that matched.
        matched: The keyword text that was matched against.
        count: Number of earlier spans selected for the same keyword.
    """

    start: int
    end: int
    exact: str
    matched: str
    count: int = 0


@dataclass(slots=True, frozen=True)
class Content:
    text: str


@dataclass(slots=True, frozen=True)
class Start:
    meta: MatchInfo


@dataclass(slots=True, frozen=True)
class End:
    meta: MatchInfo


OutputToken = Union[Content, Start, End]


"""Shared fixtures for stemlight tests."""

import re

import pytest

import stemlight
from stemlight import Segment, Transforms

_WORD_RE = re.compile(r"\w+|\W")
_SENTENCE_RE = re.compile(r"[^.!?]+(?:[.!?]+\s*|$)")


class FakeLinguistics:
    """Whitespace/punctuation segmentation and plural-stripping stemmer."""

    def __init__(self, stop_words=(), language="xx"):
        self.language = language
        self._stop_words = tuple(stop_words)

    def stem_word(self, word):
        if len(word) > 3 and word.endswith("s"):
            return word[:-1]
        return word

    def segment(self, text, granularity="word"):
        if granularity == "word":
            return [Segment(p, p[0].isalnum()) for p in _WORD_RE.findall(text)]
        return [Segment(p, True) for p in _SENTENCE_RE.findall(text)]

    def stop_words(self):
        return self._stop_words


@pytest.fixture
def fake():
    """Fake linguistics with a few English stop words."""
    return FakeLinguistics(stop_words=("the", "a", "of", "and"))


@pytest.fixture(scope="session")
def en():
    """Default English linguistics, loaded once."""
    return stemlight.load_linguistics("en-US")


@pytest.fixture
def brackets():
    """Square-bracket markers."""
    return Transforms("[", "]")


@pytest.fixture
def make_fake():
    """Factory for FakeLinguistics with custom stop words."""
    return FakeLinguistics

"""Tests for overlap resolution and occurrence counting."""

import time

from stemlight._resolver import resolve_overlaps
from stemlight._types import MatchCandidate, MatchInfo


def _c(start, end, matched, exact):
    return MatchCandidate(start=start, end=end, matched=matched, exact=exact)


def test_disjoint_all_accepted():
    """Non-overlapping candidates are all selected, sorted by start."""
    spans = resolve_overlaps([_c(4, 4, "b", "b"), _c(0, 0, "a", "a")])
    assert [(s.start, s.matched, s.count) for s in spans] == [
        (0, "a", 0), (4, "b", 0),
    ]


def test_fewer_prior_occurrences_wins():
    """A keyword seen fewer times outranks a longer, already-used one."""
    counts = {"long keyword": 1}
    spans = resolve_overlaps(
        [_c(0, 4, "long keyword", "long keyword text"), _c(2, 2, "kw", "kw")],
        counts,
    )
    assert [s.matched for s in spans] == ["kw"]


def test_longer_exact_wins():
    """Between equally-used keywords the longer exact text wins."""
    spans = resolve_overlaps([
        _c(0, 2, "stump grinder", "stump grinder"),
        _c(0, 4, "small stump grinder", "small stump grinder"),
    ])
    assert [s.matched for s in spans] == ["small stump grinder"]


def test_normalized_equal_beats_fuzzy():
    """Exact text equal to its keyword after normalization wins a tie."""
    spans = resolve_overlaps([
        _c(0, 2, "dogs run", "dog runs"),
        _c(0, 2, "dog runs", "Dog-runs"),
    ])
    assert [s.matched for s in spans] == ["dog runs"]


def test_earlier_start_wins():
    """With equal length and normalization, the earlier start wins."""
    spans = resolve_overlaps([
        _c(2, 4, "two one", "two one"),
        _c(0, 2, "one two", "one two"),
    ])
    assert [s.matched for s in spans] == ["one two"]


def test_spreads_across_keywords_before_repeating():
    """Once a keyword is used, an unused keyword outranks a repeat."""
    spans = resolve_overlaps([
        _c(0, 2, "a", "aaaaaa"),
        _c(4, 6, "a", "aaaaaa"),
        _c(6, 8, "b", "bbb"),
    ])
    assert [(s.start, s.matched, s.count) for s in spans] == [
        (0, "a", 0), (6, "b", 0),
    ]


def test_counts_are_sequential():
    """Repeated matches of one keyword count up from zero."""
    cands = [_c(i * 2, i * 2, "cat", "cat") for i in range(4)]
    spans = resolve_overlaps(cands)
    assert [s.count for s in spans] == [0, 1, 2, 3]


def test_caller_counts_updated_in_place():
    """A caller-supplied counts mapping carries numbering across calls."""
    counts = {}
    resolve_overlaps([_c(0, 0, "cat", "cat"), _c(2, 2, "dog", "dog")], counts)
    assert counts == {"cat": 1, "dog": 1}
    spans = resolve_overlaps([_c(0, 0, "cat", "cat")], counts)
    assert spans == [MatchInfo(0, 0, "cat", "cat", 1)]
    assert counts["cat"] == 2


def test_no_shared_tokens():
    """Selected spans never share a token index."""
    cands = [
        _c(0, 4, "x", "0 1 2"), _c(4, 8, "y", "2 3 4"),
        _c(2, 6, "z", "1 2 3"), _c(8, 8, "w", "4"),
    ]
    spans = resolve_overlaps(cands)
    used = set()
    for s in spans:
        covered = set(range(s.start, s.end + 1))
        assert not covered & used
        used |= covered


def test_alternating_keywords_interleave_counts():
    """Ranking by count alternates between keywords as each is used."""
    cands = [
        _c(0, 2, "cat", "cat cat"),
        _c(4, 4, "cat", "cat"),
        _c(6, 6, "dog", "dog"),
        _c(8, 8, "dog", "dog"),
        _c(2, 4, "dog", "cat dog"),
    ]
    spans = resolve_overlaps(cands)
    assert [(s.start, s.matched, s.count) for s in spans] == [
        (0, "cat", 0), (4, "cat", 1), (6, "dog", 0), (8, "dog", 1),
    ]


def test_many_candidates_scale():
    """Selection over tens of thousands of candidates stays fast."""
    n = 20000
    cands = [
        _c(i * 2, i * 2, "cat" if i % 2 else "dog", "cat" if i % 2 else "dog")
        for i in range(n)
    ]
    t0 = time.perf_counter()
    spans = resolve_overlaps(cands)
    elapsed = time.perf_counter() - t0
    assert len(spans) == n
    assert spans[-1].count == n // 2 - 1
    assert elapsed < 5.0


def test_empty():
    """No candidates, no spans."""
    assert resolve_overlaps([]) == []

"""Greedy priority-ordered selection of non-overlapping matches."""

from __future__ import annotations

import heapq
import logging
from collections import deque
from typing import TYPE_CHECKING

from ._normalize import normalize_subtle
from ._types import MatchInfo

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping

    from ._types import MatchCandidate

logger = logging.getLogger(__name__)


def resolve_overlaps(
    candidates: Iterable[MatchCandidate],
    counts: MutableMapping[str, int] | None = None,
    *,
    language: str = "",
) -> list[MatchInfo]:
    """Pick a maximal set of pairwise non-overlapping candidates.

    The best remaining candidate is taken first, ranked by:

    1. fewest prior occurrences of its keyword in ``counts``;
    2. longest exact text;
    3. exact text equal to the keyword text after normalization;
    4. earliest start.

    Accepted spans increment ``counts`` in place, so a caller-owned mapping
    carries numbering across calls.

    Returns:
        Selected spans sorted by start, each with the occurrence count it
        was accepted with.
    """
    if counts is None:
        counts = {}

    # Only the count part of the rank changes, and only for the keyword
    # just accepted. Candidates are queued per keyword in static rank order
    # and the heap holds each keyword's head, keyed by its current count.
    queues: dict[str, list[tuple[tuple[int, bool, int, int], MatchCandidate]]] = {}
    for seq, c in enumerate(candidates):
        same = normalize_subtle(c.exact, language) == normalize_subtle(
            c.matched, language,
        )
        rank = (-len(c.exact), not same, c.start, seq)
        queues.setdefault(c.matched, []).append((rank, c))

    ordered: dict[str, deque[tuple[tuple[int, bool, int, int], MatchCandidate]]] = {}
    heap: list[tuple[int, tuple[int, bool, int, int], str]] = []
    for keyword, queue in queues.items():
        queue.sort(key=lambda entry: entry[0])
        ordered[keyword] = deque(queue)
        heap.append((counts.get(keyword, 0), queue[0][0], keyword))
    heapq.heapify(heap)

    consumed: set[int] = set()
    selected: list[MatchInfo] = []

    while heap:
        _, _, keyword = heapq.heappop(heap)
        queue = ordered[keyword]
        _, best = queue.popleft()

        span = range(best.start, best.end + 1)
        if any(i in consumed for i in span):
            logger.debug("Dropping overlapping match %r", best.exact)
        else:
            consumed.update(span)
            count = counts.get(keyword, 0)
            counts[keyword] = count + 1
            selected.append(MatchInfo(
                start=best.start,
                end=best.end,
                exact=best.exact,
                matched=best.matched,
                count=count,
            ))

        if queue:
            heapq.heappush(heap, (counts.get(keyword, 0), queue[0][0], keyword))

    selected.sort(key=lambda m: m.start)
    return selected

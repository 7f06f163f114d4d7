"""
Mastermind-style scoring (feedback) for a single pair of codes.

Conventions:
  - black : right color in the right slot
  - white : right color in the wrong slot, never reusing a slot

Algorithm (two-pass):
  1) Count blacks and collect the leftover (non-matching) symbols of `b`.
  2) Each non-matching symbol of `a` takes one leftover symbol of the same
     color if one is still available; that's a white.

Codes in this game never repeat a color, so plain membership would do, but
the counting form also gives the textbook answer for repeated colors
(score("BBGG", "GOYP") -> 1 white) at no extra cost.

The relation is symmetric, so results are memoized under both orders in a
ScoreCache. The cache is pure optimization: entries are never invalidated
because a score only depends on its two inputs.
"""

from __future__ import annotations

import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Score:
    white: int
    black: int

    @property
    def total(self) -> int:
        return self.white + self.black


class ScoreCache:
    """
    Thread-safe memo of (a, b) -> Score.

    Reads go straight to the dict; writes take a lock so that concurrent
    sessions can share one cache. Entries are only ever added.
    """

    def __init__(self):
        self._scores: Dict[Tuple[str, str], Score] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, a: str, b: str) -> Optional[Score]:
        return self._scores.get((a, b))

    def put(self, a: str, b: str, s: Score) -> None:
        with self._lock:
            self._scores[(a, b)] = s
            self._scores[(b, a)] = s

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, key: Tuple[str, str]) -> bool:
        return key in self._scores


# Shared by every caller that doesn't bring its own cache.
DEFAULT_CACHE = ScoreCache()


def _compute(a: str, b: str) -> Score:
    black = 0
    remaining = Counter()
    unmatched: List[str] = []
    for x, y in zip(a, b):
        if x == y:
            black += 1
        else:
            remaining[y] += 1
            unmatched.append(x)

    white = 0
    for x in unmatched:
        if remaining[x] > 0:
            white += 1
            remaining[x] -= 1  # consume one slot

    return Score(white=white, black=black)


def score(a: str, b: str, cache: Optional[ScoreCache] = None) -> Score:
    """
    Compute the feedback between codes `a` and `b`.

    Preconditions:
      - len(a) == len(b)

    Examples:
      score("BPYG", "GPYB") -> Score(white=2, black=2)
      score("OPYG", "GPYB") -> Score(white=1, black=2)
    """
    if cache is None:
        cache = DEFAULT_CACHE
    memo = cache.get(a, b)
    if memo is not None:
        cache.hits += 1
        return memo

    cache.misses += 1
    s = _compute(a, b)
    cache.put(a, b, s)
    return s


def all_scores(length: int) -> List[Score]:
    """
    Every achievable (white, black) pair for codes of `length`, i.e. all
    pairs with white + black <= length. Ordered by total, then white.
    """
    return [
        Score(white=white, black=total - white)
        for total in range(length + 1)
        for white in range(total + 1)
    ]

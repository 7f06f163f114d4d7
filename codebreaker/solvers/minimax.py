"""
Minimax (worst-case bucket) solver.

Idea:
  We're not really guessing the answer; we're picking the candidate whose
  score splits the remaining pool best in the worst case. For each unused
  candidate p, bucket the remaining candidates by score(p, c). The largest
  bucket is how many candidates could survive if p is played and the least
  helpful score comes back. Play the p with the smallest largest bucket.

  Only remaining candidates are tried, so every guess could also be the
  answer. Codes already played are skipped as guesses but stay in the pool.

Tie-break:
  First candidate in pool order. The code space is generated in alphabet
  order, so guess sequences are reproducible run to run.

Cost:
  O(|pool| * |remaining|) score lookups per call; scores are memoized, so
  this is dict traffic rather than recomputation.
"""

from __future__ import annotations
from collections import Counter
from typing import Collection, List, Optional, Sequence

from codebreaker.engine import DEFAULT_CONFIG, GameConfig, Score, ScoreCache, all_scores
from codebreaker.engine import score as score_fn
from .base import BaseSolver, register, unused


def worst_case(guess: str, remaining: Sequence[str], scores: List[Score],
               cache: Optional[ScoreCache] = None) -> int:
    """
    Largest number of remaining candidates sharing one score against `guess`.
    """
    buckets = Counter(score_fn(guess, c, cache) for c in remaining)
    return max(buckets.get(s, 0) for s in scores)


def select_next(remaining: Sequence[str], used: Collection[str],
                config: GameConfig = DEFAULT_CONFIG,
                cache: Optional[ScoreCache] = None) -> str:
    """
    Return the unused candidate minimizing the worst-case remaining count.

    Raises:
      ValueError if `remaining` is empty (nothing left to guess).
    """
    if not remaining:
        raise ValueError("No candidates left to choose from")

    # Only one option: that's the answer.
    if len(remaining) == 1:
        return remaining[0]

    pool = unused(remaining, used)
    if not pool:
        # Every candidate was already played; honest scoring never gets here
        # because a played code only survives filtering if it scored all black.
        return remaining[0]

    scores = all_scores(config.length)
    best = None
    best_worst = None
    for p in pool:
        worst = worst_case(p, remaining, scores, cache)
        if best_worst is None or worst < best_worst:
            best, best_worst = p, worst

    return best


@register
class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Minimax (smallest worst bucket)"
    version = "1.0.0"

    def next_guess(self, remaining: Sequence[str], used: Collection[str]) -> str:
        return select_next(remaining, used, self.config, self.cache)

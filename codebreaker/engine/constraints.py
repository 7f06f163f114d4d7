"""
Candidate filtering given one scored guess.

Given:
  - the current candidate list
  - the guess that was played and the score it received

Return:
  - the candidates that would have produced exactly that score.

This is the step that turns feedback into a shrinking candidate set. An
empty result means the feedback contradicts everything still possible.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .scoring import Score, ScoreCache, score


def is_consistent(candidate: str, guess: str, observed: Score,
                  cache: Optional[ScoreCache] = None) -> bool:
    return score(guess, candidate, cache) == observed


def filter_candidates(candidates: Iterable[str], guess: str, observed: Score,
                      cache: Optional[ScoreCache] = None) -> List[str]:
    """
    Keep only candidates c with score(guess, c) == observed.

    Returns:
      List[str] of consistent candidates (order preserved as in `candidates`).
    """
    return [c for c in candidates if is_consistent(c, guess, observed, cache)]

"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random among the unused candidates (codes still
    consistent with all feedback so far).

Notes:
  - Deterministic across runs with the same seed (via BaseSolver.rng).
  - This is a baseline for batch comparisons; it does not try to shrink
    the pool on purpose.
"""

from __future__ import annotations

from typing import Collection, Sequence
from .base import BaseSolver, register, unused


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, remaining: Sequence[str], used: Collection[str]) -> str:
        if not remaining:
            raise ValueError("No candidates left to choose from")
        pool = unused(remaining, used) or list(remaining)
        return pool[self.rng.randrange(len(pool))]

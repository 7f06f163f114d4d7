"""
Solve-session state machine.

State is (guess, remaining, used):
  - guess     : the code about to be (or just) played
  - remaining : candidates consistent with every score so far; only shrinks
  - used      : codes already played; only grows

One turn is begin_turn() -> (caller obtains a score) -> apply(score).
apply() moves the session to "solved", to "error", or leaves it "running"
with the next guess chosen. Nothing here does I/O; the loop that feeds
scores in lives in harness.core.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from codebreaker.engine import (DEFAULT_CONFIG, GameConfig, Score, ScoreCache,
                                all_codes, filter_candidates, render_score)
from codebreaker.solvers import BaseSolver, create_solver

log = logging.getLogger(__name__)

RUNNING = "running"
SOLVED = "solved"
ERROR = "error"


@dataclass
class Session:
    config: GameConfig
    solver: BaseSolver
    cache: Optional[ScoreCache]
    guess: str
    remaining: List[str]
    used: Set[str] = field(default_factory=set)
    history: List[Tuple[str, Score]] = field(default_factory=list)
    status: str = RUNNING
    answer: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def start(cls, config: GameConfig = DEFAULT_CONFIG, solver: Optional[BaseSolver] = None,
              cache: Optional[ScoreCache] = None, seed: Optional[int] = None) -> "Session":
        """Opening state: the fixed opener, the full code space, nothing used."""
        if solver is None:
            solver = create_solver()
        solver.reset(config=config, cache=cache, seed=seed)
        return cls(config=config, solver=solver, cache=cache,
                   guess=config.first_guess, remaining=all_codes(config))

    @property
    def attempts(self) -> int:
        return len(self.used)

    @property
    def done(self) -> bool:
        return self.status != RUNNING

    def begin_turn(self) -> str:
        """Mark the current guess as played and return it."""
        if self.done:
            raise RuntimeError(f"Session already {self.status}")
        self.used.add(self.guess)
        return self.guess

    def apply(self, observed: Score) -> str:
        """Feed the score for the current guess; returns the new status."""
        self.history.append((self.guess, observed))
        log.debug("turn %d: %s scored %r (%d candidates)",
                  self.attempts, self.guess, render_score(observed), len(self.remaining))

        if observed.black == self.config.length:
            self.status, self.answer = SOLVED, self.guess
            return self.status

        # Nothing left to narrow down, yet the last guess wasn't all black.
        if len(self.remaining) <= 1:
            return self._fail("no answer found: feedback did not converge")

        remaining = filter_candidates(self.remaining, self.guess, observed, self.cache)
        if not remaining:
            return self._fail(
                f"contradictory feedback: no candidate is consistent with "
                f"{self.guess} scored {render_score(observed) or '0'}"
            )

        self.remaining = remaining
        self.guess = self.solver.next_guess(self.remaining, self.used)
        return self.status

    def _fail(self, message: str) -> str:
        log.warning("session failed after %d guesses: %s", self.attempts, message)
        self.status, self.message = ERROR, message
        return self.status

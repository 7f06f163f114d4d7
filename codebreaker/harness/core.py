"""
Solve loop and experiment harness.

- run_session:       drive one session to solved/error against a collaborator.
- run_session_async: same loop, awaiting the collaborator's score.
- run_case:          one session against a known secret, timed, as a result dict.
- run_batch:         many cases back-to-back (optionally a random sample).
- summarize:         attempts histogram and mean over a batch.

There is no turn cap in the loop: with honest scoring the minimax solver
finishes the 6-color / 4-slot game in at most 6 guesses, and a dishonest
score ends the session with an error instead of looping.
"""

from __future__ import annotations

import inspect
import logging
import random
import time
from typing import Dict, Iterable, List, Optional

import numpy as np

from codebreaker.engine import DEFAULT_CONFIG, GameConfig, ScoreCache, all_codes
from codebreaker.solvers import BaseSolver
from .collaborators import Collaborator, SyntheticCollaborator, describe
from .session import SOLVED, Session

log = logging.getLogger(__name__)


def _finish(session: Session, collaborator: Collaborator) -> Session:
    if session.status == SOLVED:
        collaborator.on_solved(session.answer, session.attempts)
    else:
        collaborator.on_error(session.message)
    return session


def run_session(
        collaborator: Collaborator,
        *,
        config: GameConfig = DEFAULT_CONFIG,
        solver: Optional[BaseSolver] = None,
        cache: Optional[ScoreCache] = None,
        seed: Optional[int] = None,
) -> Session:
    """
    Play guesses until the collaborator scores one all black, or the
    feedback stops making sense. Exactly one of on_solved / on_error fires.

    Returns the finished Session for inspection.
    """
    session = Session.start(config, solver, cache, seed)
    while not session.done:
        guess = session.begin_turn()
        session.apply(collaborator.request_score(guess))
    return _finish(session, collaborator)


async def run_session_async(
        collaborator: Collaborator,
        *,
        config: GameConfig = DEFAULT_CONFIG,
        solver: Optional[BaseSolver] = None,
        cache: Optional[ScoreCache] = None,
        seed: Optional[int] = None,
) -> Session:
    """
    run_session for collaborators whose request_score is a coroutine (or
    returns any awaitable). Plain synchronous collaborators work too.
    """
    session = Session.start(config, solver, cache, seed)
    while not session.done:
        guess = session.begin_turn()
        observed = collaborator.request_score(guess)
        if inspect.isawaitable(observed):
            observed = await observed
        session.apply(observed)
    return _finish(session, collaborator)


def random_secret(config: GameConfig = DEFAULT_CONFIG,
                  rng: Optional[random.Random] = None) -> str:
    """Pick a secret uniformly from the code space."""
    rng = rng or random.Random()
    return rng.choice(all_codes(config))


def run_case(
        solver: BaseSolver,
        secret: str,
        *,
        config: GameConfig = DEFAULT_CONFIG,
        cache: Optional[ScoreCache] = None,
        seed: Optional[int] = None,
) -> Dict:
    """
    Solve one known secret.

    Returns:
        dict with keys:
            secret (str), answer (str | None), success (bool), guesses (int),
            time_ms (float), history (list[(guess, "2W1B")]), error (str | None)
    """
    collaborator = SyntheticCollaborator(secret, cache)

    t0 = time.perf_counter()
    session = run_session(collaborator, config=config, solver=solver, cache=cache, seed=seed)
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "secret": secret,
        "answer": collaborator.answer,
        "success": collaborator.answer == secret,
        "guesses": session.attempts,
        "time_ms": dt,
        "history": describe(session.history),
        "error": collaborator.error,
    }


def run_batch(
        solver: BaseSolver,
        secrets: Iterable[str],
        *,
        config: GameConfig = DEFAULT_CONFIG,
        cache: Optional[ScoreCache] = None,
        seed: Optional[int] = None,
        sample: Optional[int] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, that many secrets
    are drawn (with replacement, like repeated random games) using `seed`.

    Each case's seed is derived from the base seed (seed + index) so runs
    are reproducible but not identical across cases.
    """
    pool = list(secrets)
    if sample is not None:
        rng = random.Random(seed)
        pool = [rng.choice(pool) for _ in range(sample)]

    out: List[Dict] = []
    for idx, secret in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(solver, secret, config=config, cache=cache, seed=case_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: counts, mean/max guesses over solved cases, and a
    histogram {guesses: count}.
    """
    solved = [r["guesses"] for r in results if r["success"]]
    summary = {
        "num_cases": len(results),
        "solved": len(solved),
        "failed": len(results) - len(solved),
        "mean": None,
        "max": None,
        "histogram": {},
    }
    if solved:
        arr = np.asarray(solved, dtype=int)
        counts = np.bincount(arr)
        summary["mean"] = float(np.mean(arr))
        summary["max"] = int(arr.max())
        summary["histogram"] = {int(k): int(c) for k, c in enumerate(counts) if c}

    log.info("batch: %d/%d solved, mean %s guesses",
             summary["solved"], summary["num_cases"], summary["mean"])
    return summary

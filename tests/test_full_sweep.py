from codebreaker.engine import ScoreCache, all_codes
from codebreaker.harness import run_batch, summarize
from codebreaker.solvers import create_solver

# Regression guard on the minimax heuristic over the whole 6-color / 4-slot space.
MEAN_CEILING = 4.5
WORST_CASE = 6


def test_every_secret_is_solved():
    results = run_batch(create_solver("minimax"), all_codes(), cache=ScoreCache())
    assert all(r["answer"] == r["secret"] for r in results)

    s = summarize(results)
    assert s["solved"] == 360 and s["failed"] == 0
    assert s["max"] <= WORST_CASE
    assert s["mean"] <= MEAN_CEILING
    assert sum(s["histogram"].values()) == 360

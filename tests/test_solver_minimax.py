import pytest
from codebreaker.engine import Score, ScoreCache, all_codes, all_scores, filter_candidates
from codebreaker.solvers import create_solver, get_solver_ids
from codebreaker.solvers.minimax import select_next, worst_case


def test_registry():
    assert "minimax" in get_solver_ids() and "random_consistent" in get_solver_ids()
    assert create_solver().id == "minimax"
    with pytest.raises(ValueError):
        create_solver("nope")


def test_single_candidate_is_returned():
    assert select_next(["PYGO"], {"PYGO"}) == "PYGO"


def test_empty_pool_rejected():
    with pytest.raises(ValueError):
        select_next([], set())


def test_choice_minimizes_worst_bucket():
    cache = ScoreCache()
    remaining = filter_candidates(all_codes(), "BGOR", Score(2, 0), cache)
    used = {"BGOR"}
    pick = select_next(remaining, used, cache=cache)

    scores = all_scores(4)
    best = worst_case(pick, remaining, scores, cache)
    assert pick in remaining
    assert all(best <= worst_case(p, remaining, scores, cache) for p in remaining)
    # ties go to the earliest candidate
    first_best = next(p for p in remaining if worst_case(p, remaining, scores, cache) == best)
    assert pick == first_best


def test_used_guesses_are_skipped():
    remaining = ["BGOR", "BGOY", "BGOP"]
    assert select_next(remaining, {"BGOR"}) != "BGOR"
    # all used: falls back to the first candidate
    assert select_next(remaining, set(remaining)) == "BGOR"


def test_solver_class_delegates():
    solver = create_solver("minimax")
    cache = ScoreCache()
    solver.reset(cache=cache)
    remaining = filter_candidates(all_codes(), "BGOR", Score(1, 1), cache)
    assert solver.next_guess(remaining, {"BGOR"}) == select_next(remaining, {"BGOR"}, cache=cache)


def test_random_consistent_is_seeded():
    remaining = all_codes()[:20]
    a, b = create_solver("random_consistent"), create_solver("random_consistent")
    a.reset(seed=5)
    b.reset(seed=5)
    assert a.next_guess(remaining, set()) == b.next_guess(remaining, set())
    assert a.next_guess(remaining, set(remaining[1:])) == remaining[0]

import csv
import json

from codebreaker.engine import GameConfig, ScoreCache, all_codes
from codebreaker.harness import random_secret, run_batch, run_case, summarize, write_csv, write_manifest
from codebreaker.solvers import create_solver


def test_run_case_smoke():
    r = run_case(create_solver("minimax"), "PYGO", cache=ScoreCache())
    assert r["success"] is True and r["answer"] == "PYGO" and r["error"] is None
    assert r["guesses"] == len(r["history"]) <= 6
    assert r["history"][-1] == ("PYGO", "4B")


def test_random_consistent_smoke():
    r = run_case(create_solver("random_consistent"), "RBYO", seed=42)
    assert r["success"] is True


def test_run_batch_sample_is_reproducible():
    solver = create_solver("minimax")
    a = run_batch(solver, all_codes(), seed=7, sample=5)
    b = run_batch(solver, all_codes(), seed=7, sample=5)
    assert [r["secret"] for r in a] == [r["secret"] for r in b]
    assert len(a) == 5 and all(r["success"] for r in a)


def test_small_config_batch():
    cfg = GameConfig(colors="ABCD", length=3)
    results = run_batch(create_solver(), all_codes(cfg), config=cfg, cache=ScoreCache())
    assert len(results) == 24 and all(r["success"] for r in results)


def test_summarize():
    results = [
        {"success": True, "guesses": 3},
        {"success": True, "guesses": 5},
        {"success": True, "guesses": 5},
        {"success": False, "guesses": 2},
    ]
    s = summarize(results)
    assert s["num_cases"] == 4 and s["solved"] == 3 and s["failed"] == 1
    assert abs(s["mean"] - 13 / 3) < 1e-9
    assert s["max"] == 5
    assert s["histogram"] == {3: 1, 5: 2}


def test_summarize_empty():
    s = summarize([])
    assert s["mean"] is None and s["histogram"] == {}


def test_random_secret_is_valid():
    import random
    assert random_secret(rng=random.Random(1)) in set(all_codes())


def test_write_reports(tmp_path):
    results = run_batch(create_solver(), ["PYGO", "BGOR"])
    for r in results:
        r["solver_id"] = "minimax"

    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [row["secret"] for row in rows] == ["PYGO", "BGOR"]
    assert rows[1]["guess_1"] == "BGOR" and rows[1]["score_1"] == "4B"
    assert rows[1]["guess_2"] == ""

    m_path = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    with open(m_path, encoding="utf-8") as f:
        assert json.load(f)["summary"]["solved"] == 2

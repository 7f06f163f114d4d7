# apps/cli/run.py
"""
CLI entry point for the lock solver.

Two modes:
  interactive (default)
      Prints each guess and reads the score from stdin ("2W1B", "3B", ...).
  auto [N]
      Solves every code in the space (or N random secrets with --sample)
      against an honest scorer, with a live progress indicator, and writes:
        - CSV:  per-case results + guess/score history columns
        - JSON: manifest with config, summary, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from codebreaker.engine import GameConfig, InvalidConfigError, ScoreCache, all_codes
from codebreaker.harness import ConsoleCollaborator, run_case, run_session, summarize
from codebreaker.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from codebreaker.solvers import DEFAULT_SOLVER, create_solver, get_solver_ids

log = logging.getLogger("codebreaker.cli")


def _build_parser() -> argparse.ArgumentParser:
    # Build help text showing currently registered solver IDs
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="codebreaker — solve no-repeat Mastermind locks")
    ap.add_argument("mode", nargs="?", choices=["interactive", "auto"], default="interactive")
    ap.add_argument("iterations", nargs="?", type=int,
                    help="auto mode: number of random secrets (same as --sample)")
    ap.add_argument("--solver", default=DEFAULT_SOLVER,
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--colors", default="BGORYP", help="color alphabet, one symbol per color")
    ap.add_argument("--length", type=int, default=4, help="code length")
    ap.add_argument("--opener", help="first guess (defaults to the first LENGTH colors)")
    ap.add_argument("--sample", type=int,
                    help="auto mode: solve this many random secrets instead of all codes")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["bar", "plain", "off"],
        default="bar",
        help="Show auto-mode progress as a tqdm bar, a plain status line, or not at all."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def _interactive(config: GameConfig, solver_id: str, seed: int) -> int:
    collaborator = ConsoleCollaborator(config)
    run_session(collaborator, config=config, solver=create_solver(solver_id), seed=seed)
    return 0 if collaborator.answer else 1


def _auto(args, config: GameConfig) -> int:
    solver = create_solver(args.solver)
    cache = ScoreCache()

    import random
    rng = random.Random(args.seed)
    codes = all_codes(config)
    sample = args.sample or args.iterations
    if sample:
        # Independent random games, like repeated sessions against a live lock
        cases: List[str] = [rng.choice(codes) for _ in range(sample)]
    else:
        cases = codes

    total = len(cases)
    print(f"Performing {total} iterations...")

    mode = args.progress
    iterator = tqdm(cases, ncols=80, desc="Solving", unit="game") if mode == "bar" else cases

    results = []
    start = time.time()
    last_print = 0.0
    moves = 0

    for idx, secret in enumerate(iterator, 1):
        per_seed = args.seed + idx
        r = run_case(solver, secret, config=config, cache=cache, seed=per_seed)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)
        moves += r["guesses"]

        if not r["success"]:
            log.error("failed on %s: %s", secret, r["error"] or f"answered {r['answer']}")

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                sys.stderr.write(
                    f"\r[{idx}/{total}] current average moves: {moves / idx:.3f} "
                    f"| elapsed {elapsed:6.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    summary = summarize(results)
    print(f"Average solve length: {summary['mean']}")
    print(f"Worst case: {summary['max']} | failures: {summary['failed']}")
    print("Histogram: " + ", ".join(f"{k}:{v}" for k, v in summary["histogram"].items()))

    # Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "summary": summary,
        "num_cases": len(results),
        "solver_id": solver.id,
        "cache_entries": len(cache),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0 if summary["failed"] == 0 else 1


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, build the game config, and run the requested mode.
    """
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        config = GameConfig(colors=args.colors, length=args.length, opener=args.opener)
    except InvalidConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.mode == "auto":
        return _auto(args, config)
    return _interactive(config, args.solver, args.seed)


if __name__ == "__main__":
    sys.exit(main())

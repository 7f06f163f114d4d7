"""
I/O utilities for batch runs.

Responsibilities:
- write_csv:     flatten per-case results into a tidy CSV (one row per case).
- write_manifest:dump a JSON manifest with config, summary, and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional
import csv
import json
import subprocess
import datetime as dt


def write_csv(results: List[Dict], path: str, max_turns: Optional[int] = None) -> str:
    """
    Serialize a batch of results to CSV.

    Schema (columns):
      solver, secret, answer, success, guesses, time_ms, error,
      guess_1, score_1, ..., guess_<max_turns>, score_<max_turns>

    `max_turns` defaults to the longest history in the batch.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if max_turns is None:
        max_turns = max((len(r.get("history", [])) for r in results), default=0)

    fields = ["solver", "secret", "answer", "success", "guesses", "time_ms", "error"]
    for i in range(1, max_turns + 1):
        fields += [f"guess_{i}", f"score_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "solver": r.get("solver_id", "?"),
                "secret": r["secret"],
                "answer": r["answer"] or "",
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "error": r.get("error") or "",
            }

            # Expand history into fixed columns
            hist = r.get("history", [])
            for i in range(1, max_turns + 1):
                if i <= len(hist):
                    g, rendered = hist[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"score_{i}"] = rendered
                else:
                    row[f"guess_{i}"] = ""
                    row[f"score_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and batch summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (solver, colors, length, opener, seed, sample, outdir)
      - summary: output of harness.summarize(...)
      - num_cases: number of games in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

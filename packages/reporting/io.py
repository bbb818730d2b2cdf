"""
Output utilities for ranking runs.

Responsibilities:
- write_scores:          stream GuessStatistics rows as CSV (one row per guess).
- write_scores_file:     same, to a path.
- write_manifest:        dump a JSON manifest with config, dictionary hashes, and metadata.
- timestamp_id:          stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import logging
import subprocess
from pathlib import Path
from typing import Dict, Iterable, TextIO

from packages.engine.scoring import CSV_HEADER, GuessStatistics

log = logging.getLogger(__name__)


def write_scores(rows: Iterable[GuessStatistics], out: TextIO) -> int:
    """
    Write the CSV header and one row per guess to `out`.

    Schema (columns):
      WORD, COUNT, MEDIAN, MAX, SUM, IS_CANDIDATE

    Rows are written as they are produced, so a lazy iterator streams.
    Returns the number of rows written (header excluded).
    """
    w = csv.writer(out, lineterminator="\n")
    w.writerow(CSV_HEADER)
    n = 0
    for r in rows:
        w.writerow(r.as_row())
        n += 1
    log.info("wrote %d score rows", n)
    return n


def write_scores_file(rows: Iterable[GuessStatistics], path: str) -> str:
    """Write scores to a CSV file; returns the path written."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        write_scores(rows, f)
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest describing a ranking run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (paths, output options)
      - dictionaries: summaries of the answers and guesses lists
      - num_guesses: number of rows scored
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

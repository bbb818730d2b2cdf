# apps/cli/rank.py
"""
CLI entry point for ranking guess words.

This script:
  1) Loads the answer and guess dictionaries (file path, or '-' for stdin),
     failing on the first malformed line.
  2) Scores every guess against all answers, with an optional progress bar.
  3) Writes one CSV row per guess, in guess order:
       WORD,COUNT,MEDIAN,MAX,SUM,IS_CANDIDATE
     to stdout or --out, and optionally a JSON manifest.

Usage:
    python -m apps.cli.rank answers.txt guesses.txt > scores.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import asdict

from tqdm import tqdm

from packages.engine import MalformedWordError, score_guesses
from packages.reporting import (
    git_commit_or_unknown,
    timestamp_id,
    write_manifest,
    write_scores,
    write_scores_file,
)
from packages.wordlists import STDIN_MARKER, WordListIOError, read_words, summarize_words

log = logging.getLogger("wordrank.rank")

DEFAULT_DICT = "dict-small.txt"


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, load dictionaries, score, and write outputs.
    Returns the process exit status.
    """
    ap = argparse.ArgumentParser(
        description="Scores a dictionary of guess words according to how well "
                    "they filter a dictionary of candidate answers"
    )
    ap.add_argument("answers", nargs="?", default=DEFAULT_DICT,
                    help=f"dictionary of possible answer words ('-' for stdin; default {DEFAULT_DICT})")
    ap.add_argument("guesses", nargs="?", default=DEFAULT_DICT,
                    help=f"dictionary of guess words to score ('-' for stdin; default {DEFAULT_DICT})")
    ap.add_argument("--out", help="write the CSV here instead of stdout")
    ap.add_argument("--manifest", help="also write a JSON run manifest to this path")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "off"],
        default="auto",
        help="show a progress bar on stderr (auto=bar when stderr is a terminal)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log progress details")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.answers == STDIN_MARKER and args.guesses == STDIN_MARKER:
        ap.error("only one dictionary can be read from stdin")

    # 1) Load both dictionaries before writing anything
    try:
        answers = read_words(args.answers)
        guesses = read_words(args.guesses)
    except (MalformedWordError, WordListIOError) as e:
        log.error("%s", e)
        return 1

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "off"
    iterator = tqdm(guesses, ncols=80, desc="Ranking", unit="word") if mode == "bar" else guesses

    # 3) Score lazily and stream rows out
    rows = score_guesses(iterator, answers)
    if args.out:
        path = write_scores_file(rows, args.out)
        log.info("wrote %s", path)
    else:
        write_scores(rows, sys.stdout)

    if args.manifest:
        manifest = {
            "run_id": timestamp_id(),
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "dictionaries": {
                "answers": asdict(summarize_words(args.answers, answers)),
                "guesses": asdict(summarize_words(args.guesses, guesses)),
            },
            "num_guesses": len(guesses),
        }
        log.info("wrote %s", write_manifest(manifest, args.manifest))

    return 0


if __name__ == "__main__":
    sys.exit(main())

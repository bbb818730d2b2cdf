# apps/cli/check.py
"""
Validate an answers/guesses dictionary pair before ranking.

Takes file paths only (no stdin). Prints a one-line summary (counts,
SHA-256 prefixes, answers ⊆ guesses) and logs each issue found. Exits 1
if a dictionary is missing, empty, or has a malformed line.
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.wordlists import STDIN_MARKER, WordListIOError, pretty_summary, validate_dictionaries

log = logging.getLogger("wordrank.check")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Check answer and guess dictionaries.")
    ap.add_argument("answers", help="path to the answers dictionary (a file; stdin is not accepted)")
    ap.add_argument("guesses", help="path to the guesses dictionary (a file; stdin is not accepted)")
    args = ap.parse_args(argv)
    if STDIN_MARKER in (args.answers, args.guesses):
        # hashes and re-reads need a real file
        ap.error("check reads files only; save stdin to a file first")

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s",
                        stream=sys.stderr)

    try:
        rep = validate_dictionaries(args.answers, args.guesses)
    except WordListIOError as e:
        log.error("%s", e)
        return 1

    print(pretty_summary(rep))
    for issue in rep["issues"]:
        log.warning("%s", issue)
    return 0 if rep["passed"] else 1


if __name__ == "__main__":
    sys.exit(main())

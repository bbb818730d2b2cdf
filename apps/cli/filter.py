# apps/cli/filter.py
"""
Filters a dictionary of words for those that match an observed outcome.

The outcome has one glyph per letter of the guess:
  '!'  the letter is in the right place
  '?'  the letter is in the word, somewhere else
  else the letter is not in the word (beyond the occurrences already marked)

Matching words are printed one per line, in dictionary order, while the
dictionary is read.

Usage:
    python -m apps.cli.filter apple '!!..!' dict.txt
    cat dict.txt | python -m apps.cli.filter apple '.?!..' -
"""

from __future__ import annotations

import argparse
import logging
import sys

from packages.engine import MalformedFeedbackError, MalformedWordError, check_feedback, check_word, iter_compatible
from packages.wordlists import WordListIOError, iter_words

log = logging.getLogger("wordrank.filter")

DEFAULT_DICT = "dict.txt"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Filters a dictionary of words for those that match the specified pattern."
    )
    ap.add_argument("guess", help="the guess that you made")
    ap.add_argument("outcome", help="the outcome that you got, in the form `.?!..`")
    ap.add_argument("words", nargs="?", default=DEFAULT_DICT,
                    help=f"dictionary file to filter ('-' for stdin; default {DEFAULT_DICT})")
    ap.add_argument("-v", "--verbose", action="store_true", help="log a match count at the end")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    matched = 0
    try:
        guess = check_word(args.guess, source="guess")
        outcome = check_feedback(args.outcome)
        for w in iter_compatible(iter_words(args.words), guess, outcome):
            print(w)
            matched += 1
    except (MalformedWordError, MalformedFeedbackError, WordListIOError) as e:
        log.error("%s", e)
        return 1

    log.info("%d compatible word(s)", matched)
    return 0


if __name__ == "__main__":
    sys.exit(main())

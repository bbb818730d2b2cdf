"""
Distribution scoring of a guess against an answer dictionary.

For a guess g, every answer produces one feedback code. Bucketing the answers
by code gives a histogram of NUM_PATTERNS counts {c_i} (the score
distribution). From it:

  count        = sum_i c_i                 (answer dictionary size)
  max_bucket   = max_i c_i                 (worst case remaining)
  sum_squares  = sum_i c_i^2               (n * expected remaining)
  median       = size-weighted median of the buckets (see _weighted_median)
  is_candidate = c[ALL_EXACT] > 0          (g itself is a possible answer)

Lower sum_squares means the guess splits the answers more evenly; it is the
main ranking key.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence

import numpy as np

from .feedback import ALL_EXACT, NUM_PATTERNS, encode

log = logging.getLogger(__name__)

CSV_HEADER = ["WORD", "COUNT", "MEDIAN", "MAX", "SUM", "IS_CANDIDATE"]


@dataclass(frozen=True)
class GuessStatistics:
    """Summary of one guess's score distribution."""
    word: str
    count: int
    median: int
    max_bucket: int
    sum_squares: int
    is_candidate: bool

    def as_row(self) -> List[str]:
        """CSV row in CSV_HEADER order."""
        return [
            self.word,
            str(self.count),
            str(self.median),
            str(self.max_bucket),
            str(self.sum_squares),
            "true" if self.is_candidate else "false",
        ]


def score_distribution(guess: str, answers: Sequence[str]) -> np.ndarray:
    """
    Histogram of feedback codes for `guess` over `answers`.

    Returns an int64 array of length NUM_PATTERNS whose entries sum to
    len(answers).
    """
    codes = np.fromiter((encode(guess, a) for a in answers), dtype=np.int64, count=len(answers))
    return np.bincount(codes, minlength=NUM_PATTERNS)


def _weighted_median(sorted_buckets: np.ndarray, count: int) -> int:
    """
    Bucket size covering the midpoint of the cumulative bucket mass.

    Walking the ascending buckets with a remainder of count // 2, each bucket
    s seen while the remainder is positive becomes the median and is
    subtracted. That is the first bucket whose running total reaches
    count // 2. Each bucket weighs its own size, so this leans toward large
    buckets; it is not the median of the NUM_PATTERNS values.
    """
    half = count >> 1
    if half == 0:
        return 0
    cumulative = np.cumsum(sorted_buckets)
    idx = int(np.searchsorted(cumulative, half, side="left"))
    return int(sorted_buckets[idx])


def statistics(word: str, distribution: np.ndarray) -> GuessStatistics:
    """Derive GuessStatistics from a score distribution."""
    buckets = np.sort(np.asarray(distribution, dtype=np.int64))
    count = int(buckets.sum())
    return GuessStatistics(
        word=word,
        count=count,
        median=_weighted_median(buckets, count),
        max_bucket=int(buckets[-1]),
        sum_squares=int(np.dot(buckets, buckets)),
        is_candidate=bool(distribution[ALL_EXACT] > 0),
    )


def score_guess(guess: str, answers: Sequence[str]) -> GuessStatistics:
    return statistics(guess, score_distribution(guess, answers))


def score_guesses(guesses: Iterable[str], answers: Sequence[str]) -> Iterator[GuessStatistics]:
    """
    Score every guess against the same answers, in guess order.

    Lazy, so callers can stream rows (and wrap `guesses` in a progress bar).
    """
    log.debug("scoring guesses against %d answers", len(answers))
    for g in guesses:
        yield score_guess(g, answers)

"""
Candidate filtering given observed feedback.

Given:
  - a pool of words (e.g., the answer dictionary)
  - one or more (guess, feedback) observations, feedback in textual form

Return:
  - the words that would have produced exactly that feedback for every
    observation, in their original order.

Compatibility is decided by re-encoding: a candidate is consistent iff
encode(guess, candidate) equals the observed code. The encoder is the only
place the repeated-letter rules live.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .feedback import encode, from_text

# History is a sequence of (guess, feedback text) observations.
History = Iterable[Tuple[str, str]]


def is_compatible(candidate: str, guess: str, feedback: str) -> bool:
    """
    Return True if `candidate`, as the answer, yields `feedback` for `guess`.

    Examples:
      is_compatible("aplpe", "apple", "!!??!") -> True
      is_compatible("apple", "apple", "!!??!") -> False
    """
    return encode(guess, candidate) == from_text(feedback)


def iter_compatible(words: Iterable[str], guess: str, feedback: str) -> Iterator[str]:
    """Yield the words compatible with a single observation, as they arrive."""
    # Parse once; also rejects a malformed feedback before any word is read.
    code = from_text(feedback)
    for w in words:
        if encode(guess, w) == code:
            yield w


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with ALL observations in `history`.

    Returns:
      List[str] of consistent candidates (order and duplicates preserved).
    """
    observed = [(g, from_text(f)) for g, f in history]

    out: List[str] = []
    for w in words:
        if all(encode(g, w) == code for g, code in observed):
            out.append(w)
    return out

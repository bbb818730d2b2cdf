"""
Feedback pattern for a single (guess, answer) pair.

Conventions:
  - EXACT   (2) : correct letter in the correct position
  - PRESENT (1) : letter occurs elsewhere in the answer
  - ABSENT  (0) : letter not present (or present fewer times than guessed)

A pattern is stored as one integer in [0, NUM_PATTERNS): base 3, one trit
per position, position 0 the least significant trit. The textual form used
on the command line is one glyph per position: '!' exact, '?' present, and
anything else absent ('.' when rendering).

Algorithm (greedy claiming, canonical for repeated letters):
  1) Exact pass: every position where guess and answer agree is EXACT and
     claims that answer position.
  2) Present pass, guess positions left to right: claim the first unclaimed
     answer position holding the same letter (answer scanned left to right).
     If one is found the guess position is PRESENT, otherwise ABSENT.

Each answer letter can satisfy at most one guess position, and exact matches
are resolved before any present-elsewhere match.
"""

from __future__ import annotations

from enum import IntEnum
from typing import List, Sequence

from .validation import WORD_LENGTH, check_feedback


class Symbol(IntEnum):
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


NUM_PATTERNS = 3 ** WORD_LENGTH           # 243
ALL_EXACT = NUM_PATTERNS - 1              # 242, i.e. every trit == EXACT

EXACT_GLYPH = "!"
PRESENT_GLYPH = "?"
ABSENT_GLYPH = "."

_GLYPHS = {Symbol.ABSENT: ABSENT_GLYPH, Symbol.PRESENT: PRESENT_GLYPH, Symbol.EXACT: EXACT_GLYPH}
_POWERS = [3 ** i for i in range(WORD_LENGTH)]


def encode(guess: str, answer: str) -> int:
    """
    Compute the integer feedback code of `guess` against `answer`.

    Preconditions:
      - both words are WORD_LENGTH lowercase letters (see validation.check_word)

    Examples:
      to_text(encode("apple", "shape")) -> "??..!"
      to_text(encode("plump", "apple")) -> "??..?"
    """
    # Pass 1: exact matches claim their answer position.
    claimed = [g == a for g, a in zip(guess, answer)]
    exact = list(claimed)

    code = 0
    for i in range(WORD_LENGTH):
        if exact[i]:
            code += Symbol.EXACT * _POWERS[i]
            continue
        # Pass 2: first unclaimed occurrence in the answer, left to right.
        # answer[i] != guess[i] here, so position i needs no special case.
        letter = guess[i]
        for j in range(WORD_LENGTH):
            if not claimed[j] and answer[j] == letter:
                claimed[j] = True
                code += Symbol.PRESENT * _POWERS[i]
                break
    return code


def to_symbols(code: int) -> List[Symbol]:
    """Split an integer code into per-position symbols (position 0 first)."""
    if not 0 <= code < NUM_PATTERNS:
        raise ValueError(f"feedback code out of range: {code}")
    out: List[Symbol] = []
    for _ in range(WORD_LENGTH):
        code, trit = divmod(code, 3)
        out.append(Symbol(trit))
    return out


def from_symbols(symbols: Sequence[int]) -> int:
    """Inverse of to_symbols."""
    if len(symbols) != WORD_LENGTH:
        raise ValueError(f"expected {WORD_LENGTH} symbols, got {len(symbols)}")
    return sum(Symbol(s) * p for s, p in zip(symbols, _POWERS))


def to_text(code: int) -> str:
    """Render a code with the '!', '?', '.' glyphs."""
    return "".join(_GLYPHS[s] for s in to_symbols(code))


def from_text(text: str) -> int:
    """
    Parse a textual feedback code.

    '!' is exact, '?' is present, any other character is absent, so both
    ".?!.." and "-?!--" parse to the same code.
    """
    check_feedback(text)
    symbols = []
    for ch in text:
        if ch == EXACT_GLYPH:
            symbols.append(Symbol.EXACT)
        elif ch == PRESENT_GLYPH:
            symbols.append(Symbol.PRESENT)
        else:
            symbols.append(Symbol.ABSENT)
    return from_symbols(symbols)

"""
Word and feedback validation.

Every word that reaches the engine must be exactly WORD_LENGTH lowercase
ASCII letters. The encoder indexes positions directly and does not re-check,
so dictionaries and CLI arguments are validated once, at the boundary, and
rejected with an error that names the offending line.
"""

from __future__ import annotations

from string import ascii_lowercase
from typing import Optional

WORD_LENGTH = 5

_LETTERS = frozenset(ascii_lowercase)


class MalformedWordError(ValueError):
    """A dictionary line or argument is not a WORD_LENGTH lowercase word."""

    def __init__(self, word: str, *, source: Optional[str] = None, line: Optional[int] = None):
        self.word = word
        self.source = source
        self.line = line
        where = ""
        if source is not None:
            where = f"{source}:{line}: " if line is not None else f"{source}: "
        elif line is not None:
            where = f"line {line}: "
        super().__init__(
            f"{where}malformed word {word!r} (expected {WORD_LENGTH} lowercase letters a-z)"
        )


class MalformedFeedbackError(ValueError):
    """A textual feedback code does not have one glyph per position."""

    def __init__(self, feedback: str):
        self.feedback = feedback
        super().__init__(
            f"malformed feedback {feedback!r} (expected {WORD_LENGTH} characters, e.g. '.?!..')"
        )


def is_valid_word(word: str) -> bool:
    """Return True if `word` is exactly WORD_LENGTH letters a-z."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and all(ch in _LETTERS for ch in word)
    )


def check_word(word: str, *, source: Optional[str] = None, line: Optional[int] = None) -> str:
    """
    Return `word` unchanged, or raise MalformedWordError.

    `source` and `line` (1-based) are only used for the error message.
    """
    if not is_valid_word(word):
        raise MalformedWordError(word, source=source, line=line)
    return word


def check_feedback(text: str) -> str:
    """Return `text` unchanged if it has one glyph per position."""
    if not isinstance(text, str) or len(text) != WORD_LENGTH:
        raise MalformedFeedbackError(text)
    return text

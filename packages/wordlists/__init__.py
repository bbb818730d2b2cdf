from .io import STDIN_MARKER, WordListIOError, iter_lines, iter_words, read_words
from .validator import validate_dictionaries, summarize_words, pretty_summary

__all__ = [
    "STDIN_MARKER", "WordListIOError", "iter_lines", "iter_words", "read_words",
    "validate_dictionaries", "summarize_words", "pretty_summary",
]

from .feedback import (
    ALL_EXACT,
    NUM_PATTERNS,
    Symbol,
    encode,
    from_symbols,
    from_text,
    to_symbols,
    to_text,
)
from .scoring import CSV_HEADER, GuessStatistics, score_distribution, score_guess, score_guesses, statistics
from .constraints import filter_candidates, is_compatible, iter_compatible
from .validation import (
    WORD_LENGTH,
    MalformedFeedbackError,
    MalformedWordError,
    check_feedback,
    check_word,
    is_valid_word,
)

__all__ = [
    "ALL_EXACT", "NUM_PATTERNS", "WORD_LENGTH", "CSV_HEADER",
    "Symbol", "GuessStatistics",
    "encode", "to_symbols", "from_symbols", "to_text", "from_text",
    "score_distribution", "score_guess", "score_guesses", "statistics",
    "is_compatible", "iter_compatible", "filter_candidates",
    "is_valid_word", "check_word", "check_feedback",
    "MalformedWordError", "MalformedFeedbackError",
]

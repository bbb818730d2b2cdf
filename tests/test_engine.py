import pytest
from packages.engine import (
    ALL_EXACT, NUM_PATTERNS, Symbol, MalformedFeedbackError,
    encode, from_symbols, from_text, to_symbols, to_text,
    is_valid_word, check_word, MalformedWordError,
)

# --- golden patterns (repeated letters + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("apple", "apple", "!!!!!"),
    ("apple", "shape", "??..!"),
    ("shape", "apple", "..??!"),
    ("apple", "plump", ".???."),
    ("plump", "apple", "??..?"),
    ("belle", "level", ".!???"),
    ("lemon", "level", "!!..."),
    ("cools", "scoop", "??!.?"),
    ("raise", "crane", "??..!"),
    ("stare", "crane", "..!?!"),
    ("allot", "total", "??.??"),
    ("abbey", "cabin", "?.!.."),
    ("press", "spree", "????."),
])
def test_encode_golden(guess, answer, expected):
    assert to_text(encode(guess, answer)) == expected

@pytest.mark.parametrize("w", ["apple", "shape", "plump", "eerie", "zzzzz"])
def test_encode_self_is_all_exact(w):
    assert encode(w, w) == ALL_EXACT == 242

def test_encode_excess_repeats_are_absent():
    # only one 'a' in the answer, so the second guessed 'a' is absent
    assert to_text(encode("aazzz", "bbbab")) == "?...."

def test_code_is_base3_least_significant_first():
    assert from_text("??..!") == 1 + 1 * 3 + 2 * 81
    assert to_symbols(from_text("!....")) == [Symbol.EXACT] + [Symbol.ABSENT] * 4
    assert from_symbols([0, 0, 0, 0, 1]) == 81

def test_text_round_trip_covers_every_code():
    texts = {to_text(c) for c in range(NUM_PATTERNS)}
    assert len(texts) == NUM_PATTERNS
    for c in range(NUM_PATTERNS):
        assert from_text(to_text(c)) == c

def test_any_other_glyph_is_absent():
    assert from_text("-?!--") == from_text(".?!..") == from_text("x?!#_")

def test_bad_codes_and_feedback_rejected():
    with pytest.raises(ValueError):
        to_symbols(NUM_PATTERNS)
    with pytest.raises(ValueError):
        from_symbols([2, 2])
    with pytest.raises(MalformedFeedbackError):
        from_text("!!")

def test_word_validation():
    assert is_valid_word("crane") is True
    assert is_valid_word("CRANE") is False
    assert is_valid_word("cranes") is False
    assert is_valid_word("cr4ne") is False
    assert is_valid_word("") is False
    assert check_word("crane") == "crane"
    with pytest.raises(MalformedWordError) as exc:
        check_word("toolong", source="dict.txt", line=7)
    assert exc.value.line == 7 and "dict.txt:7" in str(exc.value)

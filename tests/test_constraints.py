from collections import Counter
from itertools import product

import pytest
from packages.engine import (
    NUM_PATTERNS, MalformedFeedbackError, encode, filter_candidates, is_compatible, iter_compatible, to_text,
)

@pytest.mark.parametrize("candidate,guess,outcome,expected", [
    ("apple", "apple", "!!!!!", True),
    ("apace", "apple", "!!!!!", False),
    ("apace", "apple", "!!--!", True),
    ("arace", "apple", "!!--!", False),
    ("apple", "apple", "!!--!", False),
    ("aplpe", "apple", "!!--!", False),
    ("aplpe", "apple", "!!??!", True),
    ("apple", "apple", "!!??!", False),
    ("aplie", "apple", "!!??!", False),
    ("bbbab", "aazzz", "?....", True),
])
def test_is_compatible(candidate, guess, outcome, expected):
    assert is_compatible(candidate, guess, outcome) is expected

def _count_based_pattern(guess, answer):
    # greens first, then yellows capped by the letters the answer has left
    pattern = ["."] * len(guess)
    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "!"
        else:
            remaining[a] += 1
    for i, g in enumerate(guess):
        if pattern[i] == "." and remaining[g] > 0:
            pattern[i] = "?"
            remaining[g] -= 1
    return "".join(pattern)

WORDS = ["apple", "shape", "plump", "aplpe", "apace", "arace", "aplie", "level", "belle",
         "eerie", "allot", "total", "abbey", "cabin", "aazzz", "bbbab", "press", "spree"]

def test_compatibility_matches_count_based_rule():
    for guess, cand in product(WORDS, WORDS):
        expected = _count_based_pattern(guess, cand)
        assert is_compatible(cand, guess, expected) is True
        assert to_text(encode(guess, cand)) == expected

def test_each_pair_is_compatible_with_exactly_one_code():
    for guess, cand in product(WORDS[:8], WORDS[:8]):
        hits = [c for c in range(NUM_PATTERNS) if is_compatible(cand, guess, to_text(c))]
        assert hits == [encode(guess, cand)]

def test_filter_candidates_single_observation():
    words = ["apple", "shape", "plump", "aplpe", "apace"]
    assert filter_candidates(words, [("apple", "!!..!")]) == ["apace"]

def test_filter_candidates_history_narrows_and_keeps_duplicates():
    words = ["crane", "raise", "stare", "trace", "cared", "crane"]
    one = filter_candidates(words, [("raise", "??..!")])
    assert one == ["crane", "trace", "crane"]
    two = filter_candidates(words, [("raise", "??..!"), ("trace", to_text(encode("trace", "crane")))])
    assert two == ["crane", "crane"]
    assert set(two).issubset(one)

def test_iter_compatible_streams_in_order():
    words = iter(["apace", "apple", "apace"])
    assert list(iter_compatible(words, "apple", "!!..!")) == ["apace", "apace"]

def test_iter_compatible_rejects_bad_feedback():
    with pytest.raises(MalformedFeedbackError):
        list(iter_compatible(["apple"], "apple", "!!!"))

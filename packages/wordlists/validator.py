"""
Dictionary validator for wordrank.

What this module does:
- Validate a pair of dictionaries: answers (possible true answers) and
  guesses (words to be ranked).
- Enforce the word format (lowercase a-z, exact length, one per line) and
  remember the first offending line.
- Detect duplicates; compute SHA-256 of the raw files.
- Check whether answers ⊆ guesses (not required for ranking, but a guess
  list that misses answers can never report IS_CANDIDATE for them).
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.wordlists import validate_dictionaries, pretty_summary
    rep = validate_dictionaries("answers.txt", "guesses.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from packages.engine.validation import is_valid_word

from .io import iter_lines


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class DictionaryReport:
    """Per-dictionary diagnostics and metadata."""
    path: str                          # path as given ('-' for stdin)
    exists: bool                       # did the file exist on disk?
    count: int                         # number of VALID words
    sha256: str                        # SHA-256 of the contents ('' if missing)
    unique_count: int                  # distinct valid words
    invalid_lines: int                 # number of malformed lines
    first_invalid_line: Optional[int]  # 1-based, None if all lines are valid


@dataclass
class ValidationReport:
    """Top-level validation result for the (answers, guesses) pair."""
    answers: DictionaryReport
    guesses: DictionaryReport
    answers_subset_guesses: bool
    passed: bool
    issues: List[str]


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path) -> Tuple[List[str], int, Optional[int]]:
    """
    Split a dictionary file into valid words and count the rest.

    Returns:
      (valid_words, invalid_count, first_invalid_line)
    """
    valid: List[str] = []
    invalid = 0
    first: Optional[int] = None
    for n, line in enumerate(iter_lines(path), start=1):
        if is_valid_word(line):
            valid.append(line)
        else:
            invalid += 1
            if first is None:
                first = n
    return valid, invalid, first


def _missing(path: str) -> DictionaryReport:
    return DictionaryReport(path, False, 0, "", 0, 0, None)


def _report_file(path: Path) -> Tuple[DictionaryReport, List[str]]:
    words, invalid, first = _scan(path)
    rep = DictionaryReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        first_invalid_line=first,
    )
    return rep, words


# -----------------------------
# Public API
# -----------------------------

def summarize_words(label: str, words: Sequence[str]) -> DictionaryReport:
    """
    Report for a dictionary already loaded (and validated) in memory.

    The hash covers the words joined one per line with a trailing newline,
    which matches the file hash for a cleanly formatted file.
    """
    h = hashlib.sha256()
    for w in words:
        h.update(w.encode("utf-8") + b"\n")
    return DictionaryReport(
        path=label,
        exists=True,
        count=len(words),
        sha256=h.hexdigest(),
        unique_count=len(set(words)),
        invalid_lines=0,
        first_invalid_line=None,
    )


def validate_dictionaries(answers_path: str, guesses_path: str) -> Dict:
    """
    Validate the answers/guesses dictionaries.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, duplicate/invalid diagnostics, the answers ⊆ guesses
        check, a strict `passed` flag (both files exist, are non-empty and
        contain no malformed line) and human-friendly `issues`.
    """
    issues: List[str] = []

    ans_p = Path(answers_path)
    gue_p = Path(guesses_path)

    if not ans_p.exists() or not gue_p.exists():
        if not ans_p.exists():
            issues.append(f"answers file not found: {answers_path}")
        if not gue_p.exists():
            issues.append(f"guesses file not found: {guesses_path}")
        rep = ValidationReport(
            answers=_missing(answers_path) if not ans_p.exists() else _report_file(ans_p)[0],
            guesses=_missing(guesses_path) if not gue_p.exists() else _report_file(gue_p)[0],
            answers_subset_guesses=False,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    ans_rep, answers = _report_file(ans_p)
    gue_rep, guesses = _report_file(gue_p)

    subset_ok = set(answers).issubset(guesses)
    if not subset_ok:
        # a few examples are enough to debug
        missing = sorted(set(answers) - set(guesses))[:5]
        issues.append(f"answers not subset of guesses (e.g., {missing})")

    for name, r in (("answers", ans_rep), ("guesses", gue_rep)):
        if r.count == 0:
            issues.append(f"{name} file contains 0 valid words")
        if r.invalid_lines:
            issues.append(
                f"{name} has {r.invalid_lines} malformed line(s), first at line {r.first_invalid_line}"
            )
        if r.count != r.unique_count:
            issues.append(f"{name} contains duplicate lines")

    # Duplicates and a missing subset are reported but do not fail the check:
    # ranking handles both.
    passed = (
        ans_rep.invalid_lines == 0
        and gue_rep.invalid_lines == 0
        and ans_rep.count > 0
        and gue_rep.count > 0
    )

    rep = ValidationReport(
        answers=ans_rep,
        guesses=gue_rep,
        answers_subset_guesses=subset_ok,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        answers=2315 (uniq=2315, sha=abc123...) | guesses=12972 (uniq=12972, sha=def456...) | answers⊆guesses=True | OK
    """
    a = report["answers"]
    b = report["guesses"]
    status = "OK" if report["passed"] else "FAIL"
    a_sha = (a.get("sha256") or "")[:12]
    b_sha = (b.get("sha256") or "")[:12]
    return (
        f"answers={a['count']} (uniq={a['unique_count']}, sha={a_sha}) "
        f"| guesses={b['count']} (uniq={b['unique_count']}, sha={b_sha}) "
        f"| answers⊆guesses={report['answers_subset_guesses']} | {status}"
    )

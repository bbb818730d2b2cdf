from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, TextIO

from packages.engine.validation import check_word

log = logging.getLogger(__name__)

# Conventional "read from standard input" argument.
STDIN_MARKER = "-"


class WordListIOError(OSError):
    """A dictionary could not be opened or read."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"cannot read word list {source}: {reason}")


def _label(source: Path | str) -> str:
    return "<stdin>" if str(source) == STDIN_MARKER else str(source)


@contextmanager
def _open_source(source: Path | str) -> Iterator[TextIO]:
    if str(source) == STDIN_MARKER:
        # stdin is not ours to close
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="surrogateescape")
        yield sys.stdin
        return
    try:
        # undecodable bytes survive as surrogates and fail word validation
        f = Path(source).open("r", encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise WordListIOError(str(source), exc.strerror or str(exc)) from exc
    with f:
        yield f


def iter_lines(source: Path | str) -> Iterator[str]:
    """
    Yield the lines of a file path (or stdin for '-'), stripping trailing CR/LF.
    Raises WordListIOError if the source can't be opened or read.
    """
    label = _label(source)
    with _open_source(source) as f:
        try:
            for raw in f:
                yield raw.rstrip("\r\n")
        except OSError as exc:
            raise WordListIOError(label, str(exc)) from exc


def iter_words(source: Path | str) -> Iterator[str]:
    """
    Yield validated words one per line, in source order.

    Stops at the first malformed line with MalformedWordError (carrying the
    1-based line number); lines already yielded stay yielded.
    """
    label = _label(source)
    for n, line in enumerate(iter_lines(source), start=1):
        yield check_word(line, source=label, line=n)


def read_words(source: Path | str) -> List[str]:
    """Read a whole dictionary into memory (duplicates kept, order preserved)."""
    words = list(iter_words(source))
    log.info("read %d words from %s", len(words), _label(source))
    return words

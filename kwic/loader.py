"""Reads input lines and stop-word lists from disk.

All I/O for the index lives here; `kwic.engine` only ever sees
fully materialized lists of strings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kwic.errors import EmptyInputError, KwicIOError

logger = logging.getLogger(__name__)

# Portuguese articles and contractions.
DEFAULT_STOP_WORDS = frozenset(
    ["a", "o", "as", "os", "um", "uma", "é", "de", "do", "da", "no", "na"]
)


def default_stop_words() -> frozenset[str]:
    return DEFAULT_STOP_WORDS


def _read_text(path: Path, errors: str = "strict") -> str:
    try:
        with path.open(encoding="utf-8", errors=errors, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise KwicIOError(str(path), e) from e


def _split_lines(text: str) -> list[str]:
    # Only \n and \r\n end a line; other Unicode separators stay in the text.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def load_lines(path: str | Path) -> list[str]:
    """Read every line of a UTF-8 file.

    Raises EmptyInputError if the file holds no lines at all, and
    KwicIOError if it cannot be opened or decoded.
    """
    path = Path(path)
    lines = _split_lines(_read_text(path))
    if not lines:
        raise EmptyInputError(str(path))
    logger.debug("Loaded %d lines from %s", len(lines), path)
    return lines


def load_stop_words(path: str | Path | None = None) -> frozenset[str]:
    """Load one stop word per line, or the built-in set when no path is given.

    Entries are taken verbatim (no case folding).  Blank lines are skipped
    and undecodable bytes are replaced, so an empty or garbled file just
    yields fewer entries.
    """
    if path is None:
        return default_stop_words()

    path = Path(path)
    words = frozenset(ln for ln in _split_lines(_read_text(path, errors="replace")) if ln)
    logger.debug("Loaded %d stop words from %s", len(words), path)
    return words

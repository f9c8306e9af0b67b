"""Word segmentation and stop-word normalization.

The engine and any caller that needs word boundaries must go through
`split_words` — a second splitting rule anywhere else would make
keywords and contexts disagree about what a token is.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Collection

# Ideographic blocks where every character is a word of its own.
_IDEOGRAPH_RANGES = (
    (0x3040, 0x309F),  # Hiragana
    (0x3400, 0x4DBF),  # CJK Extension A
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0x20000, 0x2FA1F),  # Extensions B..F, Compatibility Supplement
    (0x30000, 0x3134F),  # Extension G
)


def _is_ideograph(ch: str) -> bool:
    cp = ord(ch)
    return any(lo <= cp <= hi for lo, hi in _IDEOGRAPH_RANGES)


def _is_word_char(ch: str) -> bool:
    """Letters, digits and connector punctuation (``_``) build words."""
    cat = unicodedata.category(ch)
    return cat[0] in "LN" or cat == "Pc"


def split_words(line: str) -> list[str]:
    """Split a line into word tokens, keeping their original text.

    Punctuation, quotes, hyphens and whitespace separate words.
    Combining marks stay attached to the word they follow.
    """
    tokens: list[str] = []
    start: int | None = None

    for i, ch in enumerate(line):
        if _is_ideograph(ch):
            if start is not None:
                tokens.append(line[start:i])
                start = None
            tokens.append(ch)
        elif _is_word_char(ch):
            if start is None:
                start = i
        elif start is not None and unicodedata.category(ch)[0] == "M":
            continue
        elif start is not None:
            tokens.append(line[start:i])
            start = None

    if start is not None:
        tokens.append(line[start:])
    return tokens


def normalize(token: str, case_sensitive: bool) -> str:
    """Comparison form of a token: itself, or lower-cased when insensitive."""
    return token if case_sensitive else token.lower()


def is_stop_word(token: str, stop_words: Collection[str], case_sensitive: bool) -> bool:
    return normalize(token, case_sensitive) in stop_words

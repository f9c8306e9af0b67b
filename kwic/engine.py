"""KWIC engine: stop-word filter → rotation → stable sort.

`build_records` runs the whole pipeline over in-memory lines:
tokenize each line, drop stop words, emit one rotated context per
remaining token occurrence, then sort every record by its lower-cased
context.  `build_kwic_index` is the same thing flattened to
(keyword, context) pairs.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence
from dataclasses import dataclass

from kwic.text import is_stop_word, split_words

logger = logging.getLogger(__name__)

EMIT_NORMALIZED = "normalized"
EMIT_ORIGINAL = "original"
EMIT_MODES = {EMIT_NORMALIZED, EMIT_ORIGINAL}


@dataclass(frozen=True)
class ContextRecord:
    keyword: str
    context: str
    line_no: int = 0
    position: int = 0

    def as_pair(self) -> tuple[str, str]:
        return (self.keyword, self.context)

    def to_dict(self) -> dict:
        return {
            "keyword": self.keyword,
            "context": self.context,
            "line_no": self.line_no,
            "position": self.position,
        }


def rotate(tokens: Sequence[str], i: int) -> list[str]:
    """Circular left rotation so that tokens[i] comes first."""
    return list(tokens[i:]) + list(tokens[:i])


def line_records(
    line: str,
    line_no: int,
    stop_words: Collection[str],
    case_sensitive: bool = False,
    emit: str = EMIT_NORMALIZED,
) -> list[ContextRecord]:
    """Unsorted records for one line, in left-to-right occurrence order."""
    words = split_words(line)
    if not case_sensitive and emit == EMIT_NORMALIZED:
        shown = [w.lower() for w in words]
    else:
        shown = words

    records = []
    for i, word in enumerate(words):
        if is_stop_word(word, stop_words, case_sensitive):
            continue
        records.append(
            ContextRecord(
                keyword=shown[i],
                context=" ".join(rotate(shown, i)),
                line_no=line_no,
                position=i,
            )
        )
    return records


def sort_records(records: Iterable[ContextRecord]) -> list[ContextRecord]:
    # sorted() is stable: equal contexts keep line, then occurrence, order.
    return sorted(records, key=lambda r: r.context.lower())


def build_records(
    lines: Sequence[str],
    stop_words: Collection[str],
    case_sensitive: bool = False,
    emit: str = EMIT_NORMALIZED,
) -> list[ContextRecord]:
    """Build the full, sorted KWIC index as ContextRecords.

    An empty `lines` sequence is not an error and yields [].
    """
    if emit not in EMIT_MODES:
        raise ValueError(f"emit must be one of {sorted(EMIT_MODES)}, got '{emit}'.")

    records: list[ContextRecord] = []
    for line_no, line in enumerate(lines):
        records.extend(line_records(line, line_no, stop_words, case_sensitive, emit))

    logger.debug(
        "Built %d context records from %d lines (case_sensitive=%s, emit=%s)",
        len(records),
        len(lines),
        case_sensitive,
        emit,
    )
    return sort_records(records)


def build_kwic_index(
    lines: Sequence[str],
    stop_words: Collection[str],
    case_sensitive: bool = False,
    emit: str = EMIT_NORMALIZED,
) -> list[tuple[str, str]]:
    """Sorted (keyword, context) pairs for every non-stop-word occurrence."""
    return [r.as_pair() for r in build_records(lines, stop_words, case_sensitive, emit)]

"""
Tests for reading input lines and stop-word lists.
"""

from pathlib import Path

import pytest

from kwic.errors import EmptyInputError, KwicError, KwicIOError
from kwic.loader import DEFAULT_STOP_WORDS, default_stop_words, load_lines, load_stop_words


def test_load_lines_strips_line_endings(tmp_path: Path):
    src = tmp_path / "in.txt"
    src.write_bytes("first line\r\nsegunda linha\n\nlast".encode("utf-8"))
    assert load_lines(src) == ["first line", "segunda linha", "", "last"]


def test_load_lines_keeps_blank_only_file(tmp_path: Path):
    src = tmp_path / "blank.txt"
    src.write_text("\n", encoding="utf-8")
    assert load_lines(src) == [""]


def test_load_lines_empty_file_raises(tmp_path: Path):
    src = tmp_path / "empty.txt"
    src.write_text("", encoding="utf-8")
    with pytest.raises(EmptyInputError) as exc:
        load_lines(src)
    assert isinstance(exc.value, KwicError)


def test_load_lines_missing_file_wraps_os_error(tmp_path: Path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(KwicIOError) as exc:
        load_lines(missing)
    assert isinstance(exc.value.cause, FileNotFoundError)
    assert exc.value.path == str(missing)
    assert exc.value.__cause__ is exc.value.cause


def test_load_lines_invalid_utf8_is_io_error(tmp_path: Path):
    src = tmp_path / "bad.txt"
    src.write_bytes(b"ok\n\xff\xfe broken\n")
    with pytest.raises(KwicIOError) as exc:
        load_lines(src)
    assert isinstance(exc.value.cause, UnicodeDecodeError)


def test_default_stop_words():
    words = load_stop_words(None)
    assert words is DEFAULT_STOP_WORDS
    assert words == default_stop_words()
    assert {"a", "o", "é", "uma", "na"} <= words
    assert isinstance(words, frozenset)


def test_load_stop_words_verbatim(tmp_path: Path):
    src = tmp_path / "stop.txt"
    src.write_text("The\nand\n\nof\n", encoding="utf-8")
    assert load_stop_words(src) == {"The", "and", "of"}


def test_empty_stop_word_file_is_empty_set(tmp_path: Path):
    src = tmp_path / "stop.txt"
    src.write_text("", encoding="utf-8")
    assert load_stop_words(src) == frozenset()


def test_malformed_stop_word_file_does_not_fail(tmp_path: Path):
    src = tmp_path / "stop.txt"
    src.write_bytes(b"the\n\xff\xff\nof\n")
    words = load_stop_words(src)
    assert {"the", "of"} <= words


def test_missing_stop_word_file_raises(tmp_path: Path):
    with pytest.raises(KwicIOError):
        load_stop_words(tmp_path / "missing.txt")

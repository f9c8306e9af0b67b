"""
Tests for word segmentation and stop-word normalization.
"""

import pytest

from kwic.text import is_stop_word, normalize, split_words


@pytest.mark.parametrize(
    "line, expected",
    [
        ('"Hello," she said.', ["Hello", "she", "said"]),
        ("d'água", ["d", "água"]),
        ("guarda-chuva", ["guarda", "chuva"]),
        ("  tabs\tand   spaces  ", ["tabs", "and", "spaces"]),
        ("snake_case word", ["snake_case", "word"]),
        ("version 42 of 3", ["version", "42", "of", "3"]),
    ],
)
def test_punctuation_and_whitespace_separate_words(line, expected):
    assert split_words(line) == expected


def test_mixed_script_line():
    assert split_words("Olá mundo 你好 мир") == ["Olá", "mundo", "你", "好", "мир"]


def test_ideographs_split_from_adjacent_letters():
    assert split_words("abc東京def") == ["abc", "東", "京", "def"]


def test_combining_marks_stay_in_word():
    decomposed = "a\u0301gua"
    assert split_words(decomposed) == [decomposed]


def test_empty_and_punctuation_only_lines():
    assert split_words("") == []
    assert split_words("   ") == []
    assert split_words("... -- !?") == []


def test_tokenization_is_idempotent():
    line = "The quick, brown fox — jumps over 你好!"
    assert split_words(line) == split_words(line)


def test_normalize_respects_case_flag():
    assert normalize("The", case_sensitive=True) == "The"
    assert normalize("The", case_sensitive=False) == "the"
    assert normalize("ÁGUA", case_sensitive=False) == "água"
    assert normalize("МИР", case_sensitive=False) == "мир"


def test_stop_word_exact_match_only():
    stop = {"test", "The"}
    assert is_stop_word("TEST", stop, case_sensitive=False)
    assert not is_stop_word("testing", stop, case_sensitive=False)
    assert is_stop_word("The", stop, case_sensitive=True)
    assert not is_stop_word("the", stop, case_sensitive=True)
    # The set itself is never folded: "The" cannot match when comparing lower-case.
    assert not is_stop_word("The", {"The"}, case_sensitive=False)

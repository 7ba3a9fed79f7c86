# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from wordtrie.words import clamp_word, has_letters, letter_index, MAX_WORD_LENGTH

import pytest


@pytest.mark.parametrize(
    "char,expected",
    [("a", 0), ("A", 0), ("z", 25), ("Z", 25), ("m", 12), ("1", None), ("-", None), (" ", None), ("é", None)],
)
def test_letter_index(char: str, expected: int | None) -> None:
    assert letter_index(char) == expected


@pytest.mark.parametrize("word,expected", [("abc", True), ("a1", True), ("123", False), ("", False), ("--", False)])
def test_has_letters(word: str, expected: bool) -> None:
    assert has_letters(word) is expected


def test_clamp_word(caplog: LogCaptureFixture) -> None:
    word = "x" * MAX_WORD_LENGTH
    assert clamp_word(word) == word
    assert not caplog.text

    assert clamp_word(word + "yz") == word
    assert "truncating" in caplog.text
    assert clamp_word("abcdef", max_length=3) == "abc"

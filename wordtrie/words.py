# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Word boundary helpers applied before words reach the trie"""
from __future__ import annotations

from typing import Final

import logging
import string

# payload of the fixed 45 byte buffer the word list format was designed around
MAX_WORD_LENGTH: Final = 44
ALPHABET: Final = string.ascii_lowercase

log = logging.getLogger(__name__)


def letter_index(char: str) -> int | None:
    """Branch index 0..25 for a letter, None for anything outside a..z"""
    if char not in string.ascii_letters:
        return None
    return ord(char.lower()) - ord("a")


def has_letters(word: str) -> bool:
    return any(letter_index(char) is not None for char in word)


def clamp_word(word: str, max_length: int = MAX_WORD_LENGTH) -> str:
    if len(word) <= max_length:
        return word
    log.warning("Word %r is longer than %d characters, truncating", word, max_length)
    return word[:max_length]

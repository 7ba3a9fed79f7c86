# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Single-letter substitution corrections checked against a trie"""
from __future__ import annotations

from .words import ALPHABET
from typing import Container, Iterator

import itertools


def substitutions(word: str) -> Iterator[str]:
    """Every copy of `word` with exactly one position replaced by a letter a..z.

    Positions are visited left to right and letters in alphabet order; the
    original character is also tried so the result may contain `word` itself.
    """
    for i in range(len(word)):
        prefix, suffix = word[:i], word[i + 1 :]
        for letter in ALPHABET:
            yield prefix + letter + suffix


def suggest(word: str, known_words: Container[str], limit: int | None = None) -> list[str]:
    """Known words that differ from `word` by one substituted letter.

    The same correction can appear more than once when several positions
    produce it.
    """
    candidates = (candidate for candidate in substitutions(word) if candidate != word and candidate in known_words)
    if limit is not None:
        candidates = itertools.islice(candidates, limit)
    return list(candidates)

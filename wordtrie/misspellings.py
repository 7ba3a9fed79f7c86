# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .errors import QueueEmptyError
from .words import clamp_word, MAX_WORD_LENGTH
from collections import deque


class MisspellingQueue:
    """Words found missing from the dictionary, oldest first"""

    def __init__(self, max_word_length: int = MAX_WORD_LENGTH) -> None:
        self.max_word_length = max_word_length
        self._words: deque[str] = deque()

    def enqueue(self, word: str) -> None:
        self._words.append(clamp_word(word, self.max_word_length))

    def dequeue(self) -> str:
        try:
            return self._words.popleft()
        except IndexError:
            raise QueueEmptyError("misspelling queue is empty") from None

    def drain(self) -> list[str]:
        words = []
        while self._words:
            words.append(self.dequeue())
        return words

    def __len__(self) -> int:
        return len(self._words)

    def __bool__(self) -> bool:
        return bool(self._words)

    def __repr__(self) -> str:
        return f"<MisspellingQueue {list(self._words)!r}>"

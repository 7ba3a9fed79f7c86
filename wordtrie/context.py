# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .grammar import check_sentence, correct_sentence, SentenceCorrection, SentenceReport
from .loader import load_dictionary, LoadResult
from .misspellings import MisspellingQueue
from .speller import suggest
from .trie import Trie
from .words import clamp_word, MAX_WORD_LENGTH
from types import TracebackType
from typing import Any

import logging


class SpellSession:
    """Dictionary trie and misspelling queue for one interactive session.

    Words coming from the user are truncated to `max_word_length` before they
    are looked up. close() drains the queue and destroys the trie.
    """

    def __init__(
        self,
        trie: Trie | None = None,
        queue: MisspellingQueue | None = None,
        *,
        max_word_length: int = MAX_WORD_LENGTH,
        suggestion_limit: int | None = None,
    ) -> None:
        self.log = logging.getLogger("SpellSession")
        self.trie = trie if trie is not None else Trie()
        self.queue = queue if queue is not None else MisspellingQueue(max_word_length=max_word_length)
        self.max_word_length = max_word_length
        self.suggestion_limit = suggestion_limit
        self.loaded: LoadResult | None = None
        self.closed = False

    def load(self, source: str, **kwargs: Any) -> LoadResult:
        self.loaded = load_dictionary(self.trie, source, max_word_length=self.max_word_length, **kwargs)
        return self.loaded

    def _clamp(self, word: str) -> str:
        return clamp_word(word, self.max_word_length)

    def contains(self, word: str) -> bool:
        return self.trie.contains(self._clamp(word))

    def suggest(self, word: str) -> list[str]:
        return suggest(self._clamp(word), self.trie, limit=self.suggestion_limit)

    def record_unknown(self, word: str) -> None:
        self.queue.enqueue(word)

    def drain_unknown(self) -> list[str]:
        return self.queue.drain()

    def check_word(self, word: str) -> bool:
        """Look up a word, recording it in the misspelling queue when unknown"""
        word = self._clamp(word)
        if self.trie.contains(word):
            return True
        self.record_unknown(word)
        return False

    def check_sentence(self, sentence: str) -> SentenceReport:
        return check_sentence(self.trie, sentence, max_word_length=self.max_word_length)

    def correct_sentence(self, sentence: str) -> SentenceCorrection:
        return correct_sentence(
            self.trie, sentence, limit=self.suggestion_limit, max_word_length=self.max_word_length
        )

    def close(self) -> list[str]:
        """Tear down the session, returning the misspellings that were never drained"""
        if self.closed:
            return []
        leftover = self.drain_unknown()
        if leftover:
            self.log.debug("Discarding %d recorded misspelling(s) on close", len(leftover))
        self.trie.destroy()
        self.closed = True
        return leftover

    def __enter__(self) -> SpellSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from wordtrie.errors import QueueEmptyError
from wordtrie.misspellings import MisspellingQueue

import pytest


def test_fifo_order() -> None:
    queue = MisspellingQueue()
    for word in ["cat", "dog", "bird"]:
        queue.enqueue(word)
    assert len(queue) == 3
    assert queue.dequeue() == "cat"
    assert queue.dequeue() == "dog"
    assert queue.dequeue() == "bird"
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_empty_queue() -> None:
    queue = MisspellingQueue()
    assert not queue
    assert queue.drain() == []
    with pytest.raises(LookupError):
        queue.dequeue()


def test_no_deduplication() -> None:
    queue = MisspellingQueue()
    queue.enqueue("teh")
    queue.enqueue("teh")
    assert queue.drain() == ["teh", "teh"]
    assert not queue


def test_drain_then_reuse() -> None:
    queue = MisspellingQueue()
    queue.enqueue("recieve")
    assert queue.drain() == ["recieve"]
    queue.enqueue("wierd")
    assert queue.dequeue() == "wierd"


def test_long_words_are_truncated() -> None:
    queue = MisspellingQueue(max_word_length=5)
    queue.enqueue("abcdefgh")
    assert queue.dequeue() == "abcde"

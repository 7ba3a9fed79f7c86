# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Read a whitespace separated word list from a file or an HTTP(S) URL into a trie"""
from __future__ import annotations

from .errors import DictionaryError
from .session import DEFAULT_RETRY, RetrySpec, WordListClient
from .trie import Trie
from .words import clamp_word, has_letters, MAX_WORD_LENGTH
from requests import Session
from typing import Iterable, Iterator, NamedTuple
from urllib.parse import urlsplit

import errno
import logging

log = logging.getLogger(__name__)


class LoadResult(NamedTuple):
    source: str
    found: bool
    words_read: int = 0
    words_skipped: int = 0


def is_url(source: str) -> bool:
    return urlsplit(source).scheme in ("http", "https")


def iter_words(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def fill_trie(trie: Trie, words: Iterable[str], max_word_length: int = MAX_WORD_LENGTH) -> tuple[int, int]:
    """Insert words, returning (inserted, skipped) counts"""
    inserted = skipped = 0
    for word in words:
        if not has_letters(word):
            # a letterless entry would mark the root terminal
            log.debug("Skipping dictionary entry %r without letters", word)
            skipped += 1
            continue
        trie.insert(clamp_word(word, max_word_length))
        inserted += 1
    return inserted, skipped


def _not_found(source: str) -> LoadResult:
    log.error("Dictionary file not found: %s", source)
    return LoadResult(source=source, found=False)


def load_dictionary(
    trie: Trie,
    source: str,
    *,
    max_word_length: int = MAX_WORD_LENGTH,
    request_timeout: int | None = None,
    session: Session | None = None,
    retry: RetrySpec = DEFAULT_RETRY,
) -> LoadResult:
    """Insert every word of `source` into `trie`.

    A missing source is reported and leaves the trie as it was, any other
    failure raises DictionaryError.
    """
    if is_url(source):
        with WordListClient(timeout=request_timeout, retry=retry, session=session) as client:
            text = client.fetch(source)
        if text is None:
            return _not_found(source)
        inserted, skipped = fill_trie(trie, iter_words(text.splitlines()), max_word_length)
    else:
        try:
            with open(source, encoding="utf-8", errors="replace") as fp:
                inserted, skipped = fill_trie(trie, iter_words(fp), max_word_length)
        except OSError as ex:
            if ex.errno == errno.ENOENT:
                return _not_found(source)
            raise DictionaryError(
                "Failed to read dictionary {!r}: {}: {}".format(source, ex.__class__.__name__, ex)
            ) from ex

    log.debug("Loaded %d words from %s (%d skipped)", inserted, source, skipped)
    return LoadResult(source=source, found=True, words_read=inserted, words_skipped=skipped)

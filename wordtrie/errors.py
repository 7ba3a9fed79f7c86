# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.


class SpellerError(Exception):
    """Base class for wordtrie errors"""


class DictionaryError(SpellerError):
    """Dictionary source could not be read"""


class TrieDestroyedError(SpellerError):
    """Trie used after destroy()"""


class QueueEmptyError(SpellerError, LookupError):
    """Dequeue from an empty misspelling queue"""


class SentenceTooLongError(SpellerError, ValueError):
    """Sentence has more words than can be checked"""

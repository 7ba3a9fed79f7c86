# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from .context import SpellSession
from .misspellings import MisspellingQueue
from .speller import suggest
from .trie import Trie, TrieNode

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

__all__ = ["MisspellingQueue", "SpellSession", "Trie", "TrieNode", "suggest"]

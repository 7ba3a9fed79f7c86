# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

WORDTRIE_CONFIG_DIR = os.environ.get("WORDTRIE_CONFIG_DIR", os.path.join(USER_HOME, ".config", "wordtrie"))

WORDTRIE_CONFIG = os.environ.get("WORDTRIE_CONFIG", os.path.join(WORDTRIE_CONFIG_DIR, "wordtrie.json"))
WORDTRIE_DICTIONARY = os.environ.get("WORDTRIE_DICTIONARY", "dictionary.txt")

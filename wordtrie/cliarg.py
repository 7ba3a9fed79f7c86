# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.

from .argx import arg
from functools import wraps


def sentence_text():
    """Sentence given either quoted or as separate words, joined back with single spaces"""

    def wrapper(fun):
        arg("sentence", nargs="+", help="Sentence to check, quoted or as separate words")(fun)

        @wraps(fun)
        def wrapped(self):
            setattr(self.args, "sentence", " ".join(self.args.sentence))
            return fun(self)

        return wrapped

    return wrapper


arg.json = arg("--json", help="Raw json output", action="store_true", default=False)
arg.word = arg("word", help="Word to look up")
arg.words = arg("words", nargs="+", metavar="word", help="Words to look up")
arg.suggest = arg("--suggest", help="Also list corrections for unknown words", action="store_true", default=False)
arg.sentence_text = sentence_text

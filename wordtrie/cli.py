# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .sentence_cli import SpellSentenceCLI
from .shell_cli import SpellShellCLI
from .word_cli import SpellWordCLI
from typing import Callable


class SpellCLI(
    SpellWordCLI,
    SpellSentenceCLI,
    SpellShellCLI,
):
    def pre_run(self, func: Callable[[], int | None]) -> None:
        self.session = self.open_session()

    def post_run(self) -> None:
        if self.session is None:
            return
        leftover = self.session.close()
        if leftover:
            self.log.info("Misspelled: %s", ", ".join(leftover))
        self.session = None


if __name__ == "__main__":
    SpellCLI().main()

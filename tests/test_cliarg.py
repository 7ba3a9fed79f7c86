# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from pathlib import Path
from wordtrie.argx import CommandLineTool
from wordtrie.cliarg import arg


class T(CommandLineTool):
    """Test class"""

    sentence: str | None = None

    @arg.sentence_text()
    @arg()
    def t(self) -> None:
        """t"""
        self.sentence = self.args.sentence


def test_sentence_text_joins_words(tmp_path: Path) -> None:
    test_class = T("wordtrie")
    ret = test_class.run(args=["--config", str(tmp_path / "none.json"), "t", "The", "cat", "sat."])
    assert ret is None
    assert test_class.sentence == "The cat sat."


def test_sentence_text_quoted(tmp_path: Path) -> None:
    test_class = T("wordtrie")
    test_class.run(args=["--config", str(tmp_path / "none.json"), "t", "The  cat sat."])
    assert test_class.sentence == "The  cat sat."

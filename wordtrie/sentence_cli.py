# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .base_cli import SpellBaseCLI
from .cliarg import arg


class SpellSentenceCLI(SpellBaseCLI):
    @arg.json
    @arg.sentence_text()
    def sentence__check(self) -> None:
        """Check spelling and basic grammar of a sentence"""
        report = self.get_session().check_sentence(self.args.sentence)
        if self.args.json:
            self.print_response(
                {
                    "sentence": self.args.sentence,
                    "misspelled": report.misspelled,
                    "grammar_issues": report.grammar_issues,
                    "correct": report.correct,
                }
            )
        else:
            self.show_sentence_report(report)

    @arg.json
    @arg.sentence_text()
    def sentence__correct(self) -> None:
        """Correct misspellings, articles, capitalization and the final period of a sentence"""
        correction = self.get_session().correct_sentence(self.args.sentence)
        if self.args.json:
            self.print_response(
                {
                    "sentence": correction.original,
                    "corrected": correction.corrected,
                    "replacements": [
                        {"word": word, "suggestions": suggestions} for word, suggestions in correction.replacements
                    ],
                }
            )
        else:
            self.show_sentence_correction(correction)

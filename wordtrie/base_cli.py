# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx
from .context import SpellSession
from .grammar import SentenceCorrection, SentenceReport
from .words import MAX_WORD_LENGTH
from argparse import ArgumentParser
from typing import Any, Protocol
from wordtrie import envdefault


class SessionFactory(Protocol):
    def __call__(self, *, max_word_length: int, suggestion_limit: int | None) -> SpellSession:
        ...


def positive_int(value: Any, name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError) as ex:
        raise argx.UserError("Invalid {}: {!r}, expected a positive integer".format(name, value)) from ex
    if number <= 0:
        raise argx.UserError("Invalid {}: {!r}, expected a positive integer".format(name, value))
    return number


class SpellBaseCLI(argx.CommandLineTool):
    session: SpellSession | None = None

    def __init__(self, session_factory: SessionFactory = SpellSession):
        argx.CommandLineTool.__init__(self, "wordtrie")
        self.session_factory = session_factory

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--dictionary",
            help="Word list file or http(s) URL [WORDTRIE_DICTIONARY], default from config or {!r}".format(
                envdefault.WORDTRIE_DICTIONARY
            ),
            default=None,
            metavar="PATH_OR_URL",
        )
        parser.add_argument(
            "--max-word-length",
            type=int,
            default=None,
            help="Longer words are truncated (default: {})".format(MAX_WORD_LENGTH),
        )
        parser.add_argument(
            "--suggestion-limit",
            type=int,
            default=None,
            help="Show at most N suggestions per word (default: all)",
        )
        parser.add_argument(
            "--request-timeout",
            type=int,
            default=None,
            help="Wait for up to N seconds when fetching a dictionary URL (default: infinite)",
        )

    def get_setting(self, name: str, default: Any = None) -> Any:
        """Command line value, falling back to the config file and then to `default`"""
        value = getattr(self.args, name, None)
        if value is not None:
            return value
        return self.config.get(name, default)

    def get_dictionary(self) -> str:
        return self.get_setting("dictionary", envdefault.WORDTRIE_DICTIONARY)

    def open_session(self) -> SpellSession:
        suggestion_limit = self.get_setting("suggestion_limit")
        request_timeout = self.get_setting("request_timeout")
        if request_timeout is not None:
            request_timeout = positive_int(request_timeout, "request_timeout")
        session = self.session_factory(
            max_word_length=positive_int(self.get_setting("max_word_length", MAX_WORD_LENGTH), "max_word_length"),
            suggestion_limit=None if suggestion_limit is None else positive_int(suggestion_limit, "suggestion_limit"),
        )
        try:
            session.load(self.get_dictionary(), request_timeout=request_timeout)
        except BaseException:
            session.close()
            raise
        return session

    def get_session(self) -> SpellSession:
        if self.session is None:
            raise argx.UserError("no spell check session open")
        return self.session

    def prompt(self, text: str) -> str | None:
        """Read a line from the user, None on end of input"""
        try:
            return input(text).strip()
        except EOFError:
            print()
            return None

    def show_suggestions(self, word: str, suggestions: list[str]) -> None:
        print("Suggestions for '{}':".format(word))
        if not suggestions:
            print("  (none)")
        for suggestion in suggestions:
            print("  {}".format(suggestion))

    def show_sentence_report(self, report: SentenceReport) -> None:
        for word in report.misspelled:
            print("'{}' is misspelled.".format(word))
        for issue in report.grammar_issues:
            print(issue)
        if report.correct:
            print("The sentence is grammatically and spelling-wise correct.")

    def show_sentence_correction(self, correction: SentenceCorrection) -> None:
        for word, suggestions in correction.replacements:
            print("'{}' is misspelled.".format(word))
            self.show_suggestions(word, suggestions)
        print("Corrected sentence: {}".format(correction.corrected))

    def show_misspellings(self, words: list[str]) -> None:
        if not words:
            return
        print("Misspelled words this session:")
        for word in words:
            print("  {}".format(word))

# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .base_cli import SpellBaseCLI
from .cliarg import arg
from .errors import SentenceTooLongError

MAIN_MENU = """
 **Menu
1. Check word
2. Suggest corrections for a word
3. Check sentence
4. Correct sentence
5. End spell check session"""

WORD_MENU = """
 **Spell Check Menu
1. Check another word
2. Suggest corrections for the misspelled word
3. Back to the main menu"""

INVALID_CHOICE = "Invalid choice. Please try again."


class SpellShellCLI(SpellBaseCLI):
    @arg()
    def shell(self) -> None:
        """Interactive spell check session"""
        actions = {
            "1": self._shell_check_words,
            "2": self._shell_suggest,
            "3": self._shell_check_sentence,
            "4": self._shell_correct_sentence,
        }
        while True:
            print(MAIN_MENU)
            choice = self.prompt("Enter your choice: ")
            if choice is None or choice == "5":
                break
            action = actions.get(choice)
            if action is None:
                print(INVALID_CHOICE)
                continue
            try:
                action()
            except SentenceTooLongError as ex:
                print(ex)

        print("Exiting program.")
        self.show_misspellings(self.get_session().drain_unknown())

    def _shell_check_words(self) -> None:
        session = self.get_session()
        while True:
            word = self.prompt("Enter a word to check its spelling (or 4 to stop): ")
            if word is None or word == "4":
                return
            if not word:
                continue
            if session.check_word(word):
                print("{} is spelled correctly.".format(word))
                continue

            print("{} is misspelled.".format(word))
            while True:
                print(WORD_MENU)
                choice = self.prompt("Enter your choice: ")
                if choice is None or choice == "3":
                    return
                elif choice == "1":
                    break
                elif choice == "2":
                    self.show_suggestions(word, session.suggest(word))
                else:
                    print(INVALID_CHOICE)

    def _shell_suggest(self) -> None:
        word = self.prompt("Enter the misspelled word for suggestions: ")
        if word:
            self.show_suggestions(word, self.get_session().suggest(word))

    def _shell_check_sentence(self) -> None:
        sentence = self.prompt("Enter a sentence (max 20 words): ")
        if sentence is not None:
            self.show_sentence_report(self.get_session().check_sentence(sentence))

    def _shell_correct_sentence(self) -> None:
        sentence = self.prompt("Enter a sentence to correct (max 20 words): ")
        if sentence is not None:
            self.show_sentence_correction(self.get_session().correct_sentence(sentence))

# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from .base_cli import SpellBaseCLI
from .cliarg import arg
from typing import Any


class SpellWordCLI(SpellBaseCLI):
    @arg.json
    @arg.suggest
    @arg.words
    def word__check(self) -> None:
        """Check whether words are in the dictionary"""
        session = self.get_session()
        results = []
        for word in self.args.words:
            known = session.check_word(word)
            result: dict[str, Any] = {"word": word, "correct": known}
            if self.args.suggest:
                result["suggestions"] = [] if known else session.suggest(word)
            results.append(result)

        layout = ["word", "correct"]
        if self.args.suggest:
            layout.append("suggestions")
        self.print_response(results, json=self.args.json, table_layout=layout)

    @arg.json
    @arg.word
    def word__suggest(self) -> None:
        """Suggest corrections for a word"""
        suggestions = self.get_session().suggest(self.args.word)
        if self.args.json:
            self.print_response(suggestions)
        else:
            self.show_suggestions(self.args.word, suggestions)

    @arg.json
    def dictionary__stats(self) -> None:
        """Show what was loaded from the dictionary"""
        session = self.get_session()
        loaded = session.loaded
        stats = {
            "source": self.get_dictionary(),
            "found": bool(loaded and loaded.found),
            "words_read": loaded.words_read if loaded else 0,
            "words_skipped": loaded.words_skipped if loaded else 0,
            "trie_words": session.trie.word_count,
            "trie_nodes": session.trie.node_count,
        }
        layout = ["source", "found", "words_read", "words_skipped", "trie_words", "trie_nodes"]
        self.print_response(stats, json=self.args.json, table_layout=layout)

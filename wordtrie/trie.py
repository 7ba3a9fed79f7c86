# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""26-way prefix tree over case-folded ASCII letters"""
from __future__ import annotations

from .errors import TrieDestroyedError
from .words import ALPHABET, letter_index
from typing import Iterable, Iterator


class TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: list[TrieNode | None] = [None] * len(ALPHABET)
        self.terminal = False

    def iter_children(self) -> Iterator[TrieNode]:
        return (child for child in self.children if child is not None)


class Trie:
    """Dictionary of words stored as a tree of TrieNode.

    Characters outside a..z (after lowercasing) are skipped on both insert and
    lookup, so "a1b" and "AB" reach the same node as "ab".
    """

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root: TrieNode | None = TrieNode()
        self.word_count = 0
        self.node_count = 1
        for word in words:
            self.insert(word)

    @property
    def root(self) -> TrieNode:
        if self._root is None:
            raise TrieDestroyedError("trie has been destroyed")
        return self._root

    @property
    def destroyed(self) -> bool:
        return self._root is None

    def insert(self, word: str) -> None:
        node = self.root
        for char in word:
            index = letter_index(char)
            if index is None:
                continue
            child = node.children[index]
            if child is None:
                child = node.children[index] = TrieNode()
                self.node_count += 1
            node = child
        if not node.terminal:
            node.terminal = True
            self.word_count += 1

    def _find(self, word: str) -> TrieNode | None:
        node = self.root
        for char in word:
            index = letter_index(char)
            if index is None:
                continue
            child = node.children[index]
            if child is None:
                return None
            node = child
        return node

    def contains(self, word: str) -> bool:
        node = self._find(word)
        return node is not None and node.terminal

    def destroy(self) -> None:
        """Release every node, children before their parent.

        The trie cannot be used afterwards; a second call does nothing.
        """
        if self._root is None:
            return
        # iterative post-order; a node is cleared only after all of its children
        stack: list[tuple[TrieNode, bool]] = [(self._root, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                node.children = [None] * len(ALPHABET)
                node.terminal = False
                continue
            stack.append((node, True))
            stack.extend((child, False) for child in node.iter_children())
        self._root = None
        self.word_count = 0
        self.node_count = 0

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return self.word_count

    def __repr__(self) -> str:
        if self.destroyed:
            return "<Trie destroyed>"
        return f"<Trie words={self.word_count} nodes={self.node_count}>"

# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Sentence checks layered over dictionary lookups.

Spelling is checked word by word. The grammar rules are a small fixed set:

* the first word starts with a capital letter
* "a" is not followed by a vowel-initial word and "an" is
* "he", "she" and "it" are not followed by "are"
* the sentence ends with a period

Grammar is only looked at once every word is spelled correctly.
"""
from __future__ import annotations

from .errors import SentenceTooLongError
from .speller import suggest
from .words import clamp_word
from typing import Container, Final, NamedTuple, Sequence

MAX_SENTENCE_WORDS: Final = 20
VOWELS: Final = "aeiou"
SINGULAR_SUBJECTS: Final = frozenset({"he", "she", "it"})
TRAILING_PUNCTUATION: Final = ".,;:!?"


class SentenceReport(NamedTuple):
    words: list[str]
    misspelled: list[str]
    grammar_issues: list[str]

    @property
    def correct(self) -> bool:
        return not self.misspelled and not self.grammar_issues


class SentenceCorrection(NamedTuple):
    original: str
    corrected: str
    replacements: list[tuple[str, list[str]]]


def split_sentence(sentence: str) -> list[str]:
    words = sentence.split()
    if len(words) > MAX_SENTENCE_WORDS:
        raise SentenceTooLongError(f"Sentence exceeds the word limit of {MAX_SENTENCE_WORDS} words")
    return words


def starts_with_vowel(word: str) -> bool:
    return bool(word) and word[0].lower() in VOWELS


def _bare(word: str) -> str:
    return word.rstrip(TRAILING_PUNCTUATION).lower()


def check_grammar(words: Sequence[str]) -> list[str]:
    if not words:
        return ["Empty sentence."]

    issues = []
    if words[0][0].islower():
        issues.append("The sentence should start with a capital letter.")

    pairs = list(zip(words, words[1:]))
    for word, following in pairs:
        article = word.lower()
        if article == "a" and starts_with_vowel(following):
            issues.append(f"Use 'an' before a vowel: '{following}' -> 'an'.")
        elif article == "an" and not starts_with_vowel(following):
            issues.append(f"Use 'a' before a consonant: '{following}' -> 'a'.")

    for subject, verb in pairs:
        if _bare(subject) in SINGULAR_SUBJECTS and _bare(verb) == "are":
            issues.append(f"Use 'is' with singular subjects: '{verb}' -> 'is'.")

    if not words[-1].endswith("."):
        issues.append("The sentence should end with a period.")

    return issues


def _lookup_form(word: str, max_word_length: int | None) -> str:
    return word if max_word_length is None else clamp_word(word, max_word_length)


def check_sentence(known_words: Container[str], sentence: str, max_word_length: int | None = None) -> SentenceReport:
    words = split_sentence(sentence)
    misspelled = [word for word in words if _lookup_form(word, max_word_length) not in known_words]
    grammar_issues = [] if misspelled else check_grammar(words)
    return SentenceReport(words=words, misspelled=misspelled, grammar_issues=grammar_issues)


def _fix_article(word: str, following: str) -> str:
    article = word.lower()
    if article == "a" and starts_with_vowel(following):
        fixed = "an"
    elif article == "an" and not starts_with_vowel(following):
        fixed = "a"
    else:
        return word
    return fixed.capitalize() if word[0].isupper() else fixed


def correct_sentence(
    known_words: Container[str],
    sentence: str,
    limit: int | None = None,
    max_word_length: int | None = None,
) -> SentenceCorrection:
    """Replace each unknown word with its first suggestion and apply the grammar fixes.

    With `max_word_length` set, words are truncated before they are looked up.
    """
    words = split_sentence(sentence)
    if not words:
        return SentenceCorrection(original=sentence, corrected="", replacements=[])

    replacements: list[tuple[str, list[str]]] = []
    corrected = []
    for word in words:
        lookup = _lookup_form(word, max_word_length)
        if lookup not in known_words:
            suggestions = suggest(lookup, known_words, limit=limit)
            replacements.append((word, suggestions))
            if suggestions:
                word = suggestions[0]
        corrected.append(word)

    if corrected[0][0].islower():
        corrected[0] = corrected[0][0].upper() + corrected[0][1:]

    for i in range(len(corrected) - 1):
        corrected[i] = _fix_article(corrected[i], corrected[i + 1])

    text = " ".join(corrected)
    if not text.endswith("."):
        text += "."
    return SentenceCorrection(original=sentence, corrected=text, replacements=replacements)

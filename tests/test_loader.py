# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from pathlib import Path
from requests import Session
from unittest import mock
from wordtrie.errors import DictionaryError
from wordtrie.loader import is_url, iter_words, load_dictionary
from wordtrie.trie import Trie

import io
import pytest


def make_response(status_code: int = 200, text: str = "", reason: str = "OK") -> mock.Mock:
    return mock.Mock(status_code=status_code, text=text, reason=reason)


def make_session(*responses: object) -> mock.Mock:
    session = mock.Mock(spec_set=Session)
    session.get.side_effect = list(responses)
    return session


def test_iter_words() -> None:
    stream = io.StringIO("cat bat\n\n  cot\tcap  \n")
    assert list(iter_words(stream)) == ["cat", "bat", "cot", "cap"]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("https://example.com/words.txt", True),
        ("http://example.com/words.txt", True),
        ("dictionary.txt", False),
        ("/usr/share/dict/words", False),
        ("ftp://example.com/words.txt", False),
    ],
)
def test_is_url(source: str, expected: bool) -> None:
    assert is_url(source) is expected


def test_load_file(tmp_path: Path) -> None:
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("cat bat\ncot  cap\n42 --\nCat\n", encoding="utf-8")
    trie = Trie()
    result = load_dictionary(trie, str(dictionary))
    assert result.found
    assert result.words_read == 5
    assert result.words_skipped == 2
    assert len(trie) == 4
    assert not trie.contains("")
    for word in ["cat", "bat", "cot", "cap"]:
        assert trie.contains(word)


def test_load_file_truncates_long_words(tmp_path: Path) -> None:
    dictionary = tmp_path / "dictionary.txt"
    dictionary.write_text("catalog\n", encoding="utf-8")
    trie = Trie()
    load_dictionary(trie, str(dictionary), max_word_length=3)
    assert trie.contains("cat")
    assert not trie.contains("catalog")


def test_missing_file_is_not_fatal(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    trie = Trie()
    result = load_dictionary(trie, str(tmp_path / "missing.txt"))
    assert not result.found
    assert result.words_read == 0
    assert "Dictionary file not found" in caplog.text
    assert len(trie) == 0
    assert not trie.contains("cat")


def test_unreadable_source(tmp_path: Path) -> None:
    with pytest.raises(DictionaryError):
        load_dictionary(Trie(), str(tmp_path))


def test_load_url() -> None:
    session = make_session(make_response(text="cat bat\ncot\n"))
    trie = Trie()
    result = load_dictionary(trie, "https://example.com/words.txt", session=session)
    assert session.get.call_count == 1
    assert session.get.call_args[0] == ("https://example.com/words.txt",)
    assert result.found
    assert result.words_read == 3
    assert trie.contains("cot")
    # the caller's session stays open
    session.close.assert_not_called()


def test_load_url_closes_its_own_session() -> None:
    session = make_session(make_response(text="cat"))
    with mock.patch("wordtrie.session.Session", return_value=session):
        load_dictionary(Trie(), "https://example.com/words.txt", request_timeout=5)
    assert session.get.call_args[1]["timeout"] == 5
    session.close.assert_called_once_with()


def test_load_url_closes_session_on_error() -> None:
    session = make_session(make_response(status_code=500, reason="Internal Server Error"))
    with mock.patch("wordtrie.session.Session", return_value=session):
        with pytest.raises(DictionaryError):
            load_dictionary(Trie(), "https://example.com/words.txt")
    session.close.assert_called_once_with()


def test_load_url_not_found(caplog: LogCaptureFixture) -> None:
    session = make_session(make_response(status_code=404, reason="Not Found"))
    result = load_dictionary(Trie(), "https://example.com/words.txt", session=session)
    assert not result.found
    assert "Dictionary file not found" in caplog.text


def test_load_url_server_error() -> None:
    session = make_session(make_response(status_code=500, reason="Internal Server Error"))
    with pytest.raises(DictionaryError, match="500 Internal Server Error"):
        load_dictionary(Trie(), "https://example.com/words.txt", session=session)

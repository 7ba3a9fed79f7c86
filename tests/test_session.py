# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from requests import Session
from unittest import mock
from wordtrie.errors import DictionaryError
from wordtrie.session import REQUEST_HEADERS, RetrySpec, WordListClient

import pytest
import requests

URL = "https://example.com/words.txt"


def make_response(status_code: int = 200, text: str = "", reason: str = "OK") -> mock.Mock:
    return mock.Mock(status_code=status_code, text=text, reason=reason)


def make_session(*responses: object) -> mock.Mock:
    session = mock.Mock(spec_set=Session)
    session.get.side_effect = list(responses)
    return session


def test_fetch_asks_for_plain_text() -> None:
    session = make_session(make_response(text="cat bat"))
    client = WordListClient(timeout=7, session=session)
    assert client.fetch(URL) == "cat bat"
    session.get.assert_called_once_with(URL, headers=REQUEST_HEADERS, timeout=7)
    assert REQUEST_HEADERS["accept"] == "text/plain"
    assert REQUEST_HEADERS["user-agent"].startswith("wordtrie/")


def test_fetch_without_timeout() -> None:
    session = make_session(make_response(text="cat"))
    WordListClient(session=session).fetch(URL)
    assert session.get.call_args[1]["timeout"] is None


@pytest.mark.parametrize("status_code", [200, 203])
def test_fetch_success_codes(status_code: int) -> None:
    session = make_session(make_response(status_code=status_code, text="cat"))
    assert WordListClient(session=session).fetch(URL) == "cat"


def test_fetch_not_found() -> None:
    session = make_session(make_response(status_code=404, reason="Not Found"))
    assert WordListClient(session=session).fetch(URL) is None


@pytest.mark.parametrize("status_code,reason", [(301, "Moved Permanently"), (403, "Forbidden"), (503, "Unavailable")])
def test_fetch_failure(status_code: int, reason: str) -> None:
    session = make_session(make_response(status_code=status_code, reason=reason))
    with pytest.raises(DictionaryError, match="{} {}".format(status_code, reason)):
        WordListClient(session=session).fetch(URL)


def test_fetch_retries_connection_errors(caplog: LogCaptureFixture) -> None:
    session = make_session(requests.exceptions.ConnectionError("boom"), make_response(text="cat"))
    with mock.patch("wordtrie.session.time.sleep") as sleep:
        assert WordListClient(session=session).fetch(URL) == "cat"
    sleep.assert_called_once_with(0.2)
    assert "retrying in 0.2 seconds, 2 attempts left" in caplog.text
    assert session.get.call_count == 2


def test_fetch_gives_up_after_attempts() -> None:
    session = make_session(
        requests.exceptions.ConnectionError("boom"),
        requests.exceptions.ConnectionError("boom again"),
    )
    with mock.patch("wordtrie.session.time.sleep") as sleep:
        with pytest.raises(requests.exceptions.ConnectionError, match="boom again"):
            WordListClient(session=session, retry=RetrySpec(attempts=2)).fetch(URL)
    assert session.get.call_count == 2
    assert sleep.call_count == 1


def test_own_session_is_closed() -> None:
    session = make_session()
    with mock.patch("wordtrie.session.Session", return_value=session):
        with WordListClient() as client:
            assert client.owns_session
            assert client.session is session
    session.close.assert_called_once_with()


def test_borrowed_session_is_left_open() -> None:
    session = make_session()
    with WordListClient(session=session) as client:
        assert not client.owns_session
    session.close.assert_not_called()

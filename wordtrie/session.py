# Copyright 2024, wordtrie authors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Fetching word lists over HTTP(S)"""
from __future__ import annotations

from .errors import DictionaryError
from http import HTTPStatus
from requests import Response, Session
from types import TracebackType
from typing import NamedTuple

import datetime
import logging
import requests
import time

try:
    from .version import __version__
except ImportError:
    __version__ = "UNKNOWN"

REQUEST_HEADERS = {
    "accept": "text/plain",
    "user-agent": "wordtrie/" + __version__,
}


class RetrySpec(NamedTuple):
    attempts: int = 3
    sleep: datetime.timedelta = datetime.timedelta(milliseconds=200)


DEFAULT_RETRY = RetrySpec()


class WordListClient:
    """Downloads plain text word lists.

    Dropped connections are retried according to `retry`. A session passed in
    by the caller is left open on close(), one created here is closed.
    """

    def __init__(
        self,
        *,
        timeout: int | None = None,
        retry: RetrySpec = DEFAULT_RETRY,
        session: Session | None = None,
    ) -> None:
        self.log = logging.getLogger("WordListClient")
        self.timeout = timeout
        self.retry = retry
        self.owns_session = session is None
        self.session = session if session is not None else Session()

    def _get(self, url: str) -> Response:
        attempts = self.retry.attempts
        while True:
            attempts -= 1
            try:
                return self.session.get(url, headers=REQUEST_HEADERS, timeout=self.timeout)
            except requests.exceptions.ConnectionError as ex:
                if attempts <= 0:
                    raise
                self.log.warning(
                    "GET %s failed: %s: %s; retrying in %s seconds, %s attempts left",
                    url,
                    ex.__class__.__name__,
                    ex,
                    self.retry.sleep.total_seconds(),
                    attempts,
                )
                time.sleep(self.retry.sleep.total_seconds())

    def fetch(self, url: str) -> str | None:
        """Body of `url`, or None when the server says it does not exist"""
        response = self._get(url)
        if response.status_code == HTTPStatus.NOT_FOUND:
            return None
        if not str(response.status_code).startswith("2"):
            raise DictionaryError(
                "Failed to fetch dictionary {!r}: {} {}".format(url, response.status_code, response.reason)
            )
        return response.text

    def close(self) -> None:
        if self.owns_session:
            self.session.close()

    def __enter__(self) -> WordListClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

from __future__ import annotations

import json
from typing import Any

import pytest
import requests

from neocities_client.client import NeocitiesClient

INFO_PAYLOAD: dict[str, Any] = {
    "result": "success",
    "info": {
        "sitename": "youpi",
        "views": 23456,
        "hits": 5072,
        "created_at": "Sat, 29 Jun 2013 10:11:38 -0000",
        "last_updated": "Tue, 23 Jul 2013 20:04:03 -0000",
        "domain": "youpi.example",
        "tags": ["art", "music"],
        "latest_ipfs_hash": None,
    },
}

LIST_PAYLOAD: dict[str, Any] = {
    "result": "success",
    "files": [
        {
            "path": "index.html",
            "is_directory": False,
            "size": 1023,
            "updated_at": "Sat, 13 Feb 2016 03:04:00 -0000",
            "sha1_hash": "c8aac06f343c962a24a7eb111aad739ff48b7fb1",
        },
        {
            "path": "not_found.html",
            "is_directory": False,
            "size": 271,
            "updated_at": "Sat, 13 Feb 2016 03:04:00 -0000",
            "sha1_hash": "cfdf0bda2557c322be78302da23c32fec72ffc0b",
        },
        {
            "path": "images",
            "is_directory": True,
            "updated_at": "Sat, 13 Feb 2016 03:04:00 -0000",
        },
        {
            "path": "images/cat.png",
            "is_directory": False,
            "size": 16793,
            "updated_at": "Sat, 13 Feb 2016 03:04:00 -0000",
            "sha1_hash": "41fe08fc0dd44e79f799d03ece903e62be25dc7d",
        },
    ],
}

INVALID_AUTH_PAYLOAD: dict[str, Any] = {
    "result": "error",
    "error_type": "invalid_auth",
    "message": "invalid_auth",
}


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None):
        self.status_code = status_code
        self._body = body
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text
        self.content = text.encode("utf-8")

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._body is None:
            return json.loads(self.text)
        return self._body


class FakeSession:
    """Records every request and answers from a queue of responses or exceptions."""

    def __init__(self, *responses: FakeResponse | Exception):
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, Any]] = []
        self._responses = list(responses)

    def queue(self, *responses: FakeResponse | Exception) -> None:
        self._responses.extend(responses)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self._responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def key_client(session: FakeSession) -> NeocitiesClient:
    return NeocitiesClient.new_with_key("secret-key", session=session)


@pytest.fixture
def basic_client(session: FakeSession) -> NeocitiesClient:
    return NeocitiesClient.new("youpi", "hunter2", session=session)


@pytest.fixture
def no_auth_client(session: FakeSession) -> NeocitiesClient:
    return NeocitiesClient.new_no_auth(session=session)


@pytest.fixture
def connection_refused() -> requests.ConnectionError:
    return requests.ConnectionError("[Errno 111] Connection refused")

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from http_request.clients import BaseHttpClient
from http_request.executor import HttpRequestExecutor
from http_request.request import HttpRequest


@pytest.fixture
def mocked_response() -> dict:
    return {"testing": True}


@pytest.fixture
def client(mocked_response: dict) -> MagicMock:
    mock = MagicMock(spec=BaseHttpClient)
    for verb in ("get", "post", "put", "delete"):
        getattr(mock, verb).return_value = mocked_response
    return mock


@pytest.fixture
def executor(client: MagicMock) -> HttpRequestExecutor:
    return HttpRequestExecutor(client)


@pytest.fixture
def req(executor: HttpRequestExecutor) -> HttpRequest:
    return HttpRequest.create(executor)


@pytest.fixture
def get_delete_payload() -> dict:
    return {
        "url": "test_url",
        "headers": {"header1": "test_header"},
        "json": True,
    }


@pytest.fixture
def put_post_payload() -> dict:
    return {
        "url": "test_url",
        "headers": {"header1": "test_header"},
        "body": {"testing": True},
        "json": True,
    }

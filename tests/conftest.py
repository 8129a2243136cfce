"""Shared fixtures for Love CLI tests."""

from typing import Callable, List
from urllib.parse import parse_qsl

import httpx
import pytest

from love_cli.core.client import LoveClient

TEST_API_KEY = "abcdefg"
TEST_BASE_URL = "https://example.com/api"


class RecordingHandler:
    """httpx.MockTransport handler that records requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, text: str = "[]"):
        self.status_code = status_code
        self.text = text
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]

    def query_params(self) -> dict:
        return dict(self.last_request.url.params)

    def form_fields(self) -> dict:
        return dict(parse_qsl(self.last_request.content.decode(), keep_blank_values=True))


@pytest.fixture
def make_client() -> Callable[..., LoveClient]:
    """Build a LoveClient whose HTTP traffic goes to the given handler."""
    clients = []

    def _make(handler) -> LoveClient:
        client = LoveClient(TEST_API_KEY, TEST_BASE_URL, transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()

"""Shared fixtures for riot_sso_client tests."""

import json
from typing import Any, Callable, List

import httpx
import pytest

from riot_sso_client import AsyncRiotGamesClient, RiotGamesClient


class RecordingHandler:
    """MockTransport handler that records requests and replies from a factory."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def json_response():
    """Provide a builder for responders that return a JSON payload."""

    def build(payload: Any, status_code: int = 200) -> Callable:
        def responder(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                status_code,
                content=json.dumps(payload).encode(),
                headers={"Content-Type": "application/json"},
            )

        return responder

    return build


@pytest.fixture
def text_response():
    """Provide a builder for responders that return a raw body."""

    def build(text: str, status_code: int = 200) -> Callable:
        def responder(request: httpx.Request) -> httpx.Response:
            return httpx.Response(status_code, text=text)

        return responder

    return build


@pytest.fixture
def recording_handler():
    """Provide the RecordingHandler class for tests that build their own client."""
    return RecordingHandler


@pytest.fixture
def make_client():
    """Provide a factory for RiotGamesClient instances over a mock transport."""
    opened = []

    def factory(responder, **kwargs):
        handler = RecordingHandler(responder)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        opened.append(http_client)
        client = RiotGamesClient(
            "test_client_id", "test_client_secret", http_client=http_client, **kwargs
        )
        return client, handler

    yield factory

    for http_client in opened:
        http_client.close()


@pytest.fixture
async def make_async_client():
    """Provide a factory for AsyncRiotGamesClient instances over a mock transport."""
    opened = []

    def factory(responder, **kwargs):
        handler = RecordingHandler(responder)
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        opened.append(http_client)
        client = AsyncRiotGamesClient(
            "test_client_id", "test_client_secret", http_client=http_client, **kwargs
        )
        return client, handler

    yield factory

    for http_client in opened:
        await http_client.aclose()

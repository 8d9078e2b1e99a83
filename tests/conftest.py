"""Pytest fixtures and shared test configuration.

Fixtures:
    - completion_config: Valid configuration pointing at a fake host
    - server: Scripted completion endpoint recording every request
    - completion_client: CompletionClient wired to the scripted endpoint
    - store / controller: A fresh conversation seeded with the greeting
    - async_client: HTTPX client for the host application
"""

import json
from collections.abc import AsyncGenerator
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from aiko.api.app import create_app
from aiko.completion.client import CompletionClient
from aiko.completion.config import CompletionConfig
from aiko.conversation.controller import ChatController
from aiko.conversation.store import ConversationStore

TEST_BASE_URL = "https://llm.test/api/v1"


def completion_body(content: str | None) -> dict[str, Any]:
    """Build a success envelope carrying the given completion text."""
    return {
        "id": "gen-test",
        "model": "test/model",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}}],
    }


class FakeCompletionServer:
    """Scripted stand-in for the completion endpoint.

    Responses are served in the order they were queued. Every request body is
    recorded so tests can inspect the prompt that was sent.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._queue: list[httpx.Response | Exception] = []

    @property
    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    def reply(self, content: str | None) -> None:
        self._queue.append(httpx.Response(200, json=completion_body(content)))

    def respond(self, status_code: int, **kwargs: Any) -> None:
        self._queue.append(httpx.Response(status_code, **kwargs))

    def fail(self, error: Exception) -> None:
        self._queue.append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            return httpx.Response(500, json={"error": {"message": "No response queued"}})
        item = self._queue.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def completion_config() -> CompletionConfig:
    return CompletionConfig(
        api_key="sk-test-key",
        base_url=TEST_BASE_URL,
        model_name="test/model",
        timeout=5.0,
    )


@pytest.fixture
def server() -> FakeCompletionServer:
    return FakeCompletionServer()


@pytest.fixture
def completion_client(
    completion_config: CompletionConfig, server: FakeCompletionServer
) -> CompletionClient:
    return CompletionClient(config=completion_config, transport=server.transport)


@pytest.fixture
def store() -> ConversationStore:
    return ConversationStore()


@pytest.fixture
def controller(
    store: ConversationStore, completion_client: CompletionClient
) -> ChatController:
    return ChatController(store, completion_client)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

"""Pytest configuration and shared fixtures."""
import asyncio
import os
from collections import deque

import httpx
import pytest

from teddyai.llm import ChatMessage, CompletionClient, CompletionResult, OpenRouterClient, Success
from teddyai.session import Session

TEST_SYSTEM_PROMPT = "You are a test teddy bear."


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCompletionClient(CompletionClient):
    """Completion client returning queued results without any network."""

    def __init__(self, results=(), gate: asyncio.Event | None = None):
        super().__init__(system_prompt=TEST_SYSTEM_PROMPT)
        self.results: deque[CompletionResult] = deque(results)
        self.requests: list[list[ChatMessage]] = []
        self.gate = gate
        self.in_flight = 0
        self.max_in_flight = 0
        self.closed = False

    async def complete_messages(self, messages: list[ChatMessage]) -> CompletionResult:
        self.requests.append(messages)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.gate is not None:
                await self.gate.wait()
            else:
                await asyncio.sleep(0)
            return self.results.popleft() if self.results else Success(text="hello!")
        finally:
            self.in_flight -= 1

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openrouter": os.getenv("OPENROUTER_API_KEY"),
    }


@pytest.fixture
def clock():
    """Return a fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def session(clock):
    """Return a session driven by the fake clock."""
    return Session(clock=clock)


@pytest.fixture
def fake_client():
    """Return a completion client that always answers 'hello!'."""
    return FakeCompletionClient()


@pytest.fixture
def mock_endpoint():
    """Build an OpenRouterClient whose HTTP traffic goes to ``handler``.

    Captured requests are available as ``make.requests``.
    """
    def make(handler, **kwargs) -> OpenRouterClient:
        def recording_handler(request: httpx.Request):
            make.requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        client = OpenRouterClient(
            api_key=kwargs.pop("api_key", "test-key"),
            system_prompt=TEST_SYSTEM_PROMPT,
            http_client=http_client,
            **kwargs
        )
        return client

    make.requests = []
    return make


@pytest.fixture
def make_fake_client():
    """Return the FakeCompletionClient class for tests needing custom results."""
    return FakeCompletionClient

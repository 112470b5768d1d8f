from abc import ABC, abstractmethod
from typing import Any

from ..prompts import get_system_prompt
from ..session import Session
from .models import ChatMessage, CompletionResult
from .request import build_request


class CompletionClient(ABC):
    """Abstract base class for chat completion clients.

    This module hides the design decision of which completion service is
    used. Implementations must handle provider-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Mapping every failure to a CompletionResult variant

    Implementations never raise for remote or transport failures and never
    mutate the session; the caller appends the outcome.

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            result = await client.complete(session)
        # Automatically cleaned up
    """

    def __init__(self, system_prompt: str | None = None) -> None:
        self._system_prompt = system_prompt or get_system_prompt()

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    def build_request(self, session: Session) -> list[ChatMessage]:
        """Build the request messages from a fresh snapshot of the session."""
        return build_request(self._system_prompt, session.snapshot())

    async def complete(self, session: Session) -> CompletionResult:
        """Request one completion for the session's transcript.

        Args:
            session: Session whose transcript forms the history

        Returns:
            Exactly one CompletionResult variant
        """
        return await self.complete_messages(self.build_request(session))

    @abstractmethod
    async def complete_messages(self, messages: list[ChatMessage]) -> CompletionResult:
        """Issue a single completion request for prebuilt messages.

        Args:
            messages: Wire messages, system prompt first

        Returns:
            Exactly one CompletionResult variant
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "CompletionClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise

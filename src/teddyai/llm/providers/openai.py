import logging
from typing import Any

import openai
from openai import AsyncOpenAI

from ..base import CompletionClient
from ..models import (
    ChatMessage,
    CompletionResult,
    EmptyChoice,
    HttpError,
    NetworkError,
    Success,
)

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

# Sent in place of a missing key so the endpoint, not the SDK, rejects it
MISSING_KEY_TOKEN = "undefined"


class OpenAIClient(CompletionClient):
    """Completion client for any OpenAI-compatible Chat Completions API.

    Hidden design decisions:
    - API client initialization (via OpenAI SDK)
    - Message format conversion
    - Mapping SDK errors to CompletionResult variants
    - Authentication mechanism

    Exactly one HTTP request is issued per call: the SDK's automatic
    retries are disabled.
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "gpt-4o-mini",
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        default_headers: dict[str, str] | None = None,
        system_prompt: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize the client.

        Args:
            api_key: Bearer token. A missing key is not validated locally;
                MISSING_KEY_TOKEN is sent and the endpoint rejects it.
            model: Model identifier sent with every request
            base_url: Optional custom API base URL
            timeout: Request timeout in seconds
            default_headers: Extra headers sent with every request
            system_prompt: Persona prompt (defaults to the packaged prompt)
            **client_kwargs: Additional kwargs for AsyncOpenAI client
                (e.g. ``http_client``)
        """
        super().__init__(system_prompt=system_prompt)
        self._model = model
        self._client = AsyncOpenAI(
            api_key=api_key or MISSING_KEY_TOKEN,
            base_url=base_url,
            timeout=timeout,
            max_retries=0,
            default_headers=default_headers,
            **client_kwargs
        )

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    async def complete_messages(self, messages: list[ChatMessage]) -> CompletionResult:
        """Issue one Chat Completions request.

        Args:
            messages: Wire messages, system prompt first

        Returns:
            Success with the first choice's content, EmptyChoice,
            HttpError or NetworkError
        """
        wire_messages = [
            {"role": msg.role, "content": msg.content}
            for msg in messages
        ]

        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=wire_messages,
            )
        except openai.APIStatusError as e:
            body = e.response.text
            logger.error("HTTP error! status: %s, body: %s", e.status_code, body)
            return HttpError(status=e.status_code, body=body)
        except openai.APIConnectionError as e:
            cause = str(e.__cause__ or e)
            logger.error("Error calling completion endpoint: %s", cause)
            return NetworkError(cause=cause)
        except openai.OpenAIError as e:
            # Malformed responses and other SDK-level failures
            logger.error("Error calling completion endpoint: %s", e)
            return NetworkError(cause=str(e))

        choices = getattr(completion, "choices", None)
        if not isinstance(choices, list) or not choices:
            logger.warning("No choices returned from completion endpoint")
            return EmptyChoice()

        # Only the first choice is used
        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content:
            logger.warning("First choice has no text content: %r", content)
            return EmptyChoice()

        logger.debug("Completion received (%d chars)", len(content))
        return Success(text=content)

    async def close(self) -> None:
        """Close the OpenAI client."""
        await self._client.close()

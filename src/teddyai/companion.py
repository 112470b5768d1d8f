"""Conversation orchestration.

Wires a Session to a CompletionClient and the speech collaborators:
user input -> append -> completion -> append reply (or error text) ->
speak. Every failure ends up as an assistant message; nothing raises.
"""

import asyncio
import logging
from typing import Any

from .llm import (
    CompletionClient,
    CompletionResult,
    EmptyChoice,
    HttpError,
    NetworkError,
    Success,
)
from .prompts import EMPTY_CHOICE_TEXT, HTTP_ERROR_LABEL, NETWORK_ERROR_TEXT
from .session import Message, Session
from .speech import Speaker, SpeechRecognizer

logger = logging.getLogger(__name__)


def result_to_text(result: CompletionResult) -> str:
    """Turn a completion outcome into the text shown to the user."""
    if isinstance(result, Success):
        return result.text
    if isinstance(result, HttpError):
        return f"{HTTP_ERROR_LABEL}: {result.status} - {result.body}"
    if isinstance(result, EmptyChoice):
        return EMPTY_CHOICE_TEXT
    if isinstance(result, NetworkError):
        return NETWORK_ERROR_TEXT
    raise TypeError(f"Unknown completion result: {result!r}")


class TeddyCompanion:
    """One conversation between a user and the teddy bear.

    Overlapping ``send()`` calls append their user messages immediately.
    With ``serialize_sends`` (the default) at most one request is in flight
    per session, and each request is built after the previous reply was
    appended. Without it, requests interleave at the network await and
    replies are appended in completion order.

    Usage:
        async with TeddyCompanion(session, client, speaker=speaker) as teddy:
            reply = await teddy.send("hi")
    """

    def __init__(
        self,
        session: Session,
        client: CompletionClient,
        speaker: Speaker | None = None,
        recognizer: SpeechRecognizer | None = None,
        serialize_sends: bool = True,
    ) -> None:
        self._session = session
        self._client = client
        self._speaker = speaker
        self._recognizer = recognizer
        self._send_lock = asyncio.Lock() if serialize_sends else None
        self._pending: set[asyncio.Task] = set()
        self._last_result: CompletionResult | None = None

        if recognizer is not None:
            recognizer.on_result = self._on_transcript

    @property
    def session(self) -> Session:
        return self._session

    @property
    def client(self) -> CompletionClient:
        return self._client

    @property
    def speaker(self) -> Speaker | None:
        return self._speaker

    @property
    def recognizer(self) -> SpeechRecognizer | None:
        return self._recognizer

    @property
    def last_result(self) -> CompletionResult | None:
        """Outcome of the most recently completed request."""
        return self._last_result

    @property
    def is_listening(self) -> bool:
        return self._recognizer is not None and self._recognizer.is_listening

    async def send(self, text: Any) -> Message | None:
        """Send one user turn and append the outcome.

        Args:
            text: Typed or transcribed input; blank or non-string input
                is ignored

        Returns:
            The appended assistant message, or None if input was ignored
        """
        if not isinstance(text, str) or not text.strip():
            logger.debug("Ignoring empty input")
            return None

        self._session.append(Message.user(text))

        if self._send_lock is None:
            result = await self._client.complete(self._session)
        else:
            async with self._send_lock:
                result = await self._client.complete(self._session)

        self._last_result = result
        reply = self._session.append(Message.assistant(result_to_text(result)))
        if isinstance(result, Success):
            self.speak(reply.text)
        return reply

    def speak(self, text: str) -> None:
        """Speak ``text`` if a speaker is attached. TTS failures are logged."""
        if self._speaker is None:
            return
        try:
            self._speaker.speak(text)
        except Exception as e:
            logger.error("Text-to-speech failed: %s", e)

    def listen(self) -> bool:
        """Start one speech recognition attempt.

        Returns:
            False if no recognizer is attached or it is already listening
        """
        if self._recognizer is None:
            return False
        return self._recognizer.start()

    def _on_transcript(self, transcript: str) -> None:
        task = asyncio.ensure_future(self.send(transcript))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def wait_pending(self) -> None:
        """Wait for sends started from speech transcripts."""
        if self._pending:
            await asyncio.gather(*self._pending)

    async def close(self) -> None:
        """Finish pending voice sends and release the collaborators."""
        await self.wait_pending()
        if self._recognizer is not None:
            self._recognizer.close()
        if self._speaker is not None:
            self._speaker.close()
        await self._client.close()

    async def __aenter__(self) -> "TeddyCompanion":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

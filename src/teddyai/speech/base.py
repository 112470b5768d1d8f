"""Abstract speech collaborators.

This module hides which speech engines are used. The core only depends on
these two interfaces:
- SpeechRecognizer: single-shot speech-to-text with an explicit state machine
- Speaker: fire-and-forget text-to-speech
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from ..exceptions import SpeechRecognitionError
from .models import RecognitionState

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en-US"


class SpeechRecognizer(ABC):
    """Single-shot speech recognizer.

    ``start()`` moves Idle -> Listening and asks the engine to begin.
    The engine reports back through ``_emit_result``, ``_emit_error`` and
    ``_emit_end``; at most one transcript is delivered per ``start()``.

    Listeners are plain attributes:
        recognizer.on_result = lambda transcript: ...
    """

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self._locale = locale
        self._state = RecognitionState.IDLE
        self.on_start: Callable[[], None] | None = None
        self.on_result: Callable[[str], None] | None = None
        self.on_error: Callable[[str], None] | None = None
        self.on_end: Callable[[], None] | None = None

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def state(self) -> RecognitionState:
        return self._state

    @property
    def is_listening(self) -> bool:
        return self._state is RecognitionState.LISTENING

    def start(self) -> bool:
        """Begin one recognition attempt.

        Returns:
            False if already listening, True otherwise
        """
        if self.is_listening:
            logger.debug("Recognizer already listening, start ignored")
            return False

        self._state = RecognitionState.LISTENING
        logger.info("Listening started")
        self._notify(self.on_start)
        try:
            self._begin()
        except SpeechRecognitionError as e:
            self._emit_error(e.reason)
            self._emit_end()
        except Exception as e:
            # Leave Listening so later start() calls are accepted
            self._emit_error(str(e))
            self._emit_end()
            raise
        return True

    def close(self) -> None:
        """Release engine resources."""
        pass

    @abstractmethod
    def _begin(self) -> None:
        """Start the engine. May deliver results synchronously or later."""
        pass

    def _emit_result(self, transcript: Any) -> None:
        if not self.is_listening:
            logger.debug("Dropping result outside a listening session")
            return
        if not isinstance(transcript, str):
            logger.warning("Transcript is not a string: %r", transcript)
            self._state = RecognitionState.ENDED
            return
        self._state = RecognitionState.RESULT
        self._notify(self.on_result, transcript)

    def _emit_error(self, reason: str) -> None:
        if not self.is_listening:
            return
        logger.error("Speech recognition error: %s", reason)
        self._state = RecognitionState.ERROR
        self._notify(self.on_error, reason)

    def _emit_end(self) -> None:
        if self.is_listening:
            self._state = RecognitionState.ENDED
        logger.info("Listening ended")
        self._notify(self.on_end)

    def _notify(self, callback: Callable[..., None] | None, *args: Any) -> None:
        if callback is not None:
            callback(*args)


class Speaker(ABC):
    """Fire-and-forget text-to-speech."""

    def __init__(self, locale: str = DEFAULT_LOCALE) -> None:
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    @abstractmethod
    def speak(self, text: str, locale: str | None = None) -> None:
        """Start speaking ``text``. Returns without waiting for playback."""
        pass

    def close(self) -> None:
        """Release engine resources."""
        pass

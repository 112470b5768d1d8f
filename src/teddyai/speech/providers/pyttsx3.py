"""Offline text-to-speech through pyttsx3.

pyttsx3 engines block while speaking and are not thread-safe, so every
utterance runs on one dedicated worker thread that owns the engine.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from ..base import DEFAULT_LOCALE, Speaker

logger = logging.getLogger(__name__)


class Pyttsx3Speaker(Speaker):
    """Speaker backed by the local pyttsx3 engine."""

    def __init__(self, locale: str = DEFAULT_LOCALE, rate: int | None = None) -> None:
        super().__init__(locale=locale)
        # Import here so the dependency stays optional
        import pyttsx3

        self._pyttsx3 = pyttsx3
        self._rate = rate
        self._engine: Any | None = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="teddy-tts")

    def speak(self, text: str, locale: str | None = None) -> Future:
        """Queue ``text`` for playback and return immediately."""
        future = self._executor.submit(self._say, text, locale or self._locale)
        future.add_done_callback(self._log_failure)
        return future

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)

    def _say(self, text: str, locale: str) -> None:
        engine = self._get_engine()
        voice_id = self._voice_for(engine, locale)
        if voice_id is not None:
            engine.setProperty("voice", voice_id)
        engine.say(text)
        engine.runAndWait()

    def _get_engine(self) -> Any:
        if self._engine is None:
            self._engine = self._pyttsx3.init()
            if self._rate is not None:
                self._engine.setProperty("rate", self._rate)
        return self._engine

    @staticmethod
    def _voice_for(engine: Any, locale: str) -> str | None:
        """Pick the first installed voice matching the locale's language."""
        language = locale.split("-")[0].lower()
        for voice in engine.getProperty("voices") or []:
            languages = [
                lang.decode(errors="ignore") if isinstance(lang, bytes) else str(lang)
                for lang in getattr(voice, "languages", []) or []
            ]
            if any(language in lang.lower() for lang in languages):
                return voice.id
        return None

    @staticmethod
    def _log_failure(future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error("Text-to-speech failed: %s", error)

"""Offline speech-to-text through Vosk and PyAudio.

Each start() opens a fresh Kaldi recognizer and a 16 kHz mono input
stream on a worker thread, reads until Vosk reports a final phrase or
the listen timeout passes, then hands the outcome back to the event loop.
"""

import asyncio
import json
import logging
import os
import time
from concurrent.futures import Future, ThreadPoolExecutor
from functools import partial
from typing import Any

from ...exceptions import SpeechRecognitionError
from ..base import DEFAULT_LOCALE, SpeechRecognizer

logger = logging.getLogger(__name__)

SAMPLE_RATE = 16000
CHUNK_SIZE = 512
DEFAULT_LISTEN_TIMEOUT = 8.0


class VoskRecognizer(SpeechRecognizer):
    """Single-shot microphone recognizer backed by a local Vosk model."""

    def __init__(
        self,
        model_path: str | None,
        locale: str = DEFAULT_LOCALE,
        listen_timeout: float = DEFAULT_LISTEN_TIMEOUT,
        sample_rate: int = SAMPLE_RATE,
    ) -> None:
        """Load the model.

        Args:
            model_path: Directory of an unpacked Vosk model matching ``locale``
            locale: Speech locale
            listen_timeout: Seconds to wait for a final phrase
            sample_rate: Microphone sample rate in Hz

        Raises:
            SpeechRecognitionError: If the model directory does not exist
        """
        super().__init__(locale=locale)
        # Import here so the dependencies stay optional
        import pyaudio
        import vosk

        if not model_path or not os.path.isdir(model_path):
            raise SpeechRecognitionError(f"Vosk model not found at: {model_path}")

        self._pyaudio = pyaudio
        self._vosk = vosk
        self._model = vosk.Model(model_path)
        self._listen_timeout = listen_timeout
        self._sample_rate = sample_rate
        self._audio: Any | None = None
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="teddy-stt")

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        if self._audio is not None:
            self._audio.terminate()
            self._audio = None

    def _begin(self) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None
        future = self._executor.submit(self._listen)
        future.add_done_callback(partial(self._hand_back, loop))

    def _hand_back(self, loop: asyncio.AbstractEventLoop | None, future: Future) -> None:
        # Runs on the worker thread; listeners run on the loop
        if loop is None:
            self._deliver(future)
        elif not loop.is_closed():
            loop.call_soon_threadsafe(self._deliver, future)

    def _deliver(self, future: Future) -> None:
        if future.cancelled():
            self._emit_error("aborted")
        elif isinstance(future.exception(), SpeechRecognitionError):
            self._emit_error(future.exception().reason)
        elif future.exception() is not None:
            self._emit_error(str(future.exception()))
        elif future.result():
            self._emit_result(future.result())
        else:
            self._emit_error("no-speech")
        self._emit_end()

    def _listen(self) -> str:
        recognizer = self._vosk.KaldiRecognizer(self._model, self._sample_rate)
        try:
            stream = self._get_audio().open(
                format=self._pyaudio.paInt16,
                channels=1,
                rate=self._sample_rate,
                input=True,
                frames_per_buffer=CHUNK_SIZE,
            )
        except OSError as e:
            logger.debug("Could not open microphone: %s", e)
            raise SpeechRecognitionError("audio-capture") from e

        try:
            deadline = time.monotonic() + self._listen_timeout
            while time.monotonic() < deadline:
                data = stream.read(CHUNK_SIZE, exception_on_overflow=False)
                if recognizer.AcceptWaveform(data):
                    text = json.loads(recognizer.Result()).get("text", "").strip()
                    if text:
                        return text
            return json.loads(recognizer.FinalResult()).get("text", "").strip()
        finally:
            stream.stop_stream()
            stream.close()

    def _get_audio(self) -> Any:
        if self._audio is None:
            self._audio = self._pyaudio.PyAudio()
        return self._audio

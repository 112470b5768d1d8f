"""Queue-backed recognizer.

Stands in for a microphone when transcripts are known in advance (demo
scripts, tests). Each start() consumes one queued item: a string is
delivered as a transcript, an exception as a recognition error.
"""

import asyncio
from collections import deque
from collections.abc import Iterable

from ..base import DEFAULT_LOCALE, SpeechRecognizer


class ScriptedRecognizer(SpeechRecognizer):
    """Recognizer that replays queued transcripts."""

    def __init__(
        self,
        items: Iterable[str | Exception] = (),
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        super().__init__(locale=locale)
        self._queue: deque[str | Exception] = deque(items)

    def feed(self, item: str | Exception) -> None:
        """Queue one transcript or error for a later start()."""
        self._queue.append(item)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def _begin(self) -> None:
        item: str | Exception | None = self._queue.popleft() if self._queue else None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._deliver(item)
            return
        # Deliver on the next loop iteration, like a real engine callback
        loop.call_soon(self._deliver, item)

    def _deliver(self, item: str | Exception | None) -> None:
        if item is None:
            self._emit_error("no-speech")
        elif isinstance(item, Exception):
            self._emit_error(str(item))
        else:
            self._emit_result(item)
        self._emit_end()

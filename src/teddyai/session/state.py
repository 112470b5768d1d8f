"""Append-only conversation state.

This module hides how the transcript is stored and how listeners are told
about new entries. A Session is owned by whoever constructs it and is
injected into the engagement monitor and the companion.
"""

import time
from collections.abc import Callable, Iterator

from .models import Message, Origin

AppendListener = Callable[[Message], None]


class Session:
    """Ordered transcript plus the time of the last user message.

    The clock is injectable so tests can control time. It must return
    seconds on a monotonic scale.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._transcript: list[Message] = []
        self._listeners: list[AppendListener] = []
        self._last_user_message_at = clock()

    @property
    def clock(self) -> Callable[[], float]:
        return self._clock

    @property
    def last_user_message_at(self) -> float:
        """Clock reading of the most recent user append (creation time before any)."""
        return self._last_user_message_at

    def append(self, message: Message) -> Message:
        """Append a message and notify listeners.

        User messages also move ``last_user_message_at`` to now.
        """
        self._transcript.append(message)
        if message.origin is Origin.USER:
            self._last_user_message_at = self._clock()

        # Listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(message)
        return message

    def snapshot(self) -> tuple[Message, ...]:
        """Return an immutable view of the transcript."""
        return tuple(self._transcript)

    def subscribe(self, listener: AppendListener) -> Callable[[], None]:
        """Register an append listener.

        Returns:
            Callable that removes the listener again (safe to call twice)
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._transcript)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.snapshot())

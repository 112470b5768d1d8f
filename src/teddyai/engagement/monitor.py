"""Idle-time engagement monitor.

Hides the timer mechanics used to re-engage a silent user. The monitor
is either Idle (no timer) or Armed (exactly one pending timer). The
session's ``last_user_message_at`` is the single source of truth; the
timer callback re-checks it instead of trusting its own schedule.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from ..exceptions import ConfigurationError
from ..prompts import get_proactive_prompt
from ..session import Message, Origin, Session

logger = logging.getLogger(__name__)

DEFAULT_IDLE_WINDOW = 15.0


class EngagementMonitor:
    """Appends a proactive assistant message after a period of user silence.

    Usage:
        async with EngagementMonitor(session, idle_window=15.0) as monitor:
            ...  # nudges are appended while the block runs
        # timer released and listener removed
    """

    def __init__(
        self,
        session: Session,
        idle_window: float = DEFAULT_IDLE_WINDOW,
        proactive_text: str | None = None,
        on_nudge: Callable[[Message], None] | None = None,
    ) -> None:
        """Initialize the monitor.

        Args:
            session: Session to watch and append to
            idle_window: Seconds of user silence before a nudge
            proactive_text: Nudge text (defaults to the packaged prompt)
            on_nudge: Optional callback invoked with each appended nudge
        """
        if idle_window <= 0:
            raise ConfigurationError(f"idle_window must be positive, got {idle_window}")

        self._session = session
        self._idle_window = idle_window
        self._proactive_text = proactive_text or get_proactive_prompt()
        self._on_nudge = on_nudge

        self._handle: asyncio.TimerHandle | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._last_nudge_at: float | None = None

    @property
    def idle_window(self) -> float:
        return self._idle_window

    @property
    def is_armed(self) -> bool:
        return self._handle is not None

    @property
    def deadline(self) -> float | None:
        """Loop time at which the pending timer fires, None when idle."""
        return self._handle.when() if self._handle is not None else None

    @property
    def is_running(self) -> bool:
        return self._unsubscribe is not None

    def start(self) -> None:
        """Subscribe to the session and arm the first timer.

        Must be called from a running event loop.
        """
        if self.is_running:
            return
        self._loop = asyncio.get_running_loop()
        self._unsubscribe = self._session.subscribe(self._on_append)
        self._arm(self._idle_window)
        logger.debug("Engagement monitor started (idle window %.1fs)", self._idle_window)

    def stop(self) -> None:
        """Cancel any pending timer and stop watching. Idempotent."""
        self._cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._loop = None

    def check(self) -> bool:
        """Run the expiry logic once.

        Appends the proactive message if the user has been silent for at
        least the idle window (measured from the later of the last user
        message and the last nudge).

        Returns:
            True if a nudge was appended
        """
        now = self._session.clock()
        reference = self._session.last_user_message_at
        if self._last_nudge_at is not None:
            reference = max(reference, self._last_nudge_at)

        if now - reference < self._idle_window:
            return False

        self._last_nudge_at = now
        message = self._session.append(Message.assistant(self._proactive_text))
        logger.info("User idle for %.1fs, sent proactive message", now - self._session.last_user_message_at)
        if self._on_nudge is not None:
            self._on_nudge(message)
        return True

    def _on_append(self, message: Message) -> None:
        if message.origin is Origin.USER:
            self._arm(self._idle_window)

    def _on_timer(self) -> None:
        self._handle = None
        try:
            self.check()
        finally:
            if self.is_running:
                self._arm(self._remaining())

    def _remaining(self) -> float:
        reference = self._session.last_user_message_at
        if self._last_nudge_at is not None:
            reference = max(reference, self._last_nudge_at)
        elapsed = self._session.clock() - reference
        return max(self._idle_window - elapsed, 0.0)

    def _arm(self, delay: float) -> None:
        # At most one pending timer
        self._cancel()
        if self._loop is None:
            return
        self._handle = self._loop.call_later(delay, self._on_timer)

    def _cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    async def __aenter__(self) -> "EngagementMonitor":
        self.start()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.stop()

"""State model for single-shot speech recognition."""

from enum import Enum


class RecognitionState(str, Enum):
    """Lifecycle of one recognition attempt.

    IDLE -> LISTENING -> {RESULT | ERROR | ENDED}; any state other than
    LISTENING accepts a new start().
    """

    IDLE = "idle"
    LISTENING = "listening"
    RESULT = "result"
    ERROR = "error"
    ENDED = "ended"

"""Exception hierarchy for teddyai.

Completion failures never surface as exceptions; they are returned as
CompletionResult variants. These cover the local collaborators.
"""


class TeddyError(Exception):
    """Base class for teddyai errors."""


class ConfigurationError(TeddyError):
    """Invalid settings (unknown provider, non-positive timings, ...)."""

    def __init__(self, message: str):
        super().__init__(f"Invalid configuration: {message}")


class CameraUnavailableError(TeddyError):
    """The camera could not be opened."""

    def __init__(self, message: str, index: int | None = None):
        msg = f"Camera unavailable: {message}"
        if index is not None:
            msg += f" (index: {index})"
        super().__init__(msg)
        self.index = index


class SpeechRecognitionError(TeddyError):
    """Device or engine level failure while recognising speech."""

    def __init__(self, reason: str):
        super().__init__(f"Speech recognition error: {reason}")
        self.reason = reason

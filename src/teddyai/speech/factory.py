"""Factories for creating speech collaborators."""

from typing import Any

from ..exceptions import ConfigurationError
from .base import Speaker, SpeechRecognizer


def create_speaker(backend: str = "silent", **kwargs: Any) -> Speaker:
    """Create a speaker.

    Args:
        backend: Speaker type ("silent" or "pyttsx3")
        **kwargs: Backend-specific configuration (e.g. locale, rate)

    Returns:
        Speaker instance

    Raises:
        ConfigurationError: If backend type is not supported
    """
    if backend == "silent":
        from .providers.silent import SilentSpeaker
        return SilentSpeaker(**kwargs)

    elif backend == "pyttsx3":
        from .providers.pyttsx3 import Pyttsx3Speaker
        return Pyttsx3Speaker(**kwargs)

    raise ConfigurationError(
        f"Unsupported speaker backend: {backend}. "
        f"Supported backends: silent, pyttsx3"
    )


def create_recognizer(backend: str = "scripted", **kwargs: Any) -> SpeechRecognizer:
    """Create a speech recognizer.

    Args:
        backend: Recognizer type ("scripted" or "vosk")
        **kwargs: Backend-specific configuration (e.g. items, model_path)

    Raises:
        ConfigurationError: If backend type is not supported
        SpeechRecognitionError: If the engine cannot be initialised
    """
    if backend == "scripted":
        from .providers.scripted import ScriptedRecognizer
        return ScriptedRecognizer(**kwargs)

    elif backend == "vosk":
        from .providers.vosk import VoskRecognizer
        return VoskRecognizer(**kwargs)

    raise ConfigurationError(
        f"Unsupported recognizer backend: {backend}. "
        f"Supported backends: scripted, vosk"
    )

"""Speech collaborators for teddyai.

Speech-to-text and text-to-speech are hidden behind small interfaces so the
conversation core never depends on a specific engine.
"""

from .base import DEFAULT_LOCALE, Speaker, SpeechRecognizer
from .factory import create_recognizer, create_speaker
from .models import RecognitionState
from .providers import ScriptedRecognizer, SilentSpeaker

__all__ = [
    "DEFAULT_LOCALE",
    "RecognitionState",
    "ScriptedRecognizer",
    "SilentSpeaker",
    "Speaker",
    "SpeechRecognizer",
    "create_recognizer",
    "create_speaker",
]

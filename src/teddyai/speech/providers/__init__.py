from .scripted import ScriptedRecognizer
from .silent import SilentSpeaker

__all__ = ["ScriptedRecognizer", "SilentSpeaker"]

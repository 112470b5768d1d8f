"""Conversation session state for teddyai."""

from .models import Message, Origin
from .state import AppendListener, Session

__all__ = [
    "AppendListener",
    "Message",
    "Origin",
    "Session",
]

"""Terminal UI module for teddyai.

Provides a Textual-based single-page chat with the teddy bear.

Module structure (each module hides a design decision):
- widgets.py: Custom widgets (transcript rendering, input bar, camera status)
- styles.py: CSS styling (layout decisions)
- app.py: Application orchestration (user interaction flow)
"""

from .app import TeddyApp, run_textual_tui
from .widgets import CameraStatus, ChatHistoryWidget, ChatInputBar

__all__ = [
    "CameraStatus",
    "ChatHistoryWidget",
    "ChatInputBar",
    "TeddyApp",
    "run_textual_tui",
]

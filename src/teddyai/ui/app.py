"""Main Textual TUI application.

Orchestrates the UI components: renders every session append, forwards
typed and spoken input to the companion, and runs the engagement monitor
for as long as the app is mounted.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..camera import Camera, CameraStream, acquire_camera
from ..companion import TeddyCompanion
from ..engagement import DEFAULT_IDLE_WINDOW, EngagementMonitor
from ..session import Message
from .styles import APP_CSS
from .widgets import CameraStatus, ChatHistoryWidget, ChatInputBar


class TeddyApp(App):
    """Single-page teddy bear chat."""

    CSS = APP_CSS
    TITLE = "TeddyAI"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+s", "speak", "Speak"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
    ]

    def __init__(
        self,
        companion: TeddyCompanion,
        idle_window: float = DEFAULT_IDLE_WINDOW,
        camera: Camera | None = None,
    ) -> None:
        super().__init__()
        self._companion = companion
        self._camera = camera
        self._stream: CameraStream | None = None
        self._monitor = EngagementMonitor(
            companion.session,
            idle_window=idle_window,
            on_nudge=lambda message: companion.speak(message.text),
        )
        self._unsubscribe = None

    @property
    def monitor(self) -> EngagementMonitor:
        return self._monitor

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield CameraStatus("Camera: starting...", id="camera-status")
        yield ChatHistoryWidget(id="chat-history")
        yield ChatInputBar(id="chat-input-bar", show_speak=self._companion.recognizer is not None)
        yield Footer()

    def on_mount(self) -> None:
        """Render the transcript, start the monitor and the camera."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        for message in self._companion.session.snapshot():
            chat.add_message(message)
        self._unsubscribe = self._companion.session.subscribe(self._on_append)

        recognizer = self._companion.recognizer
        if recognizer is not None:
            recognizer.on_start = lambda: self._set_listening(True)
            recognizer.on_end = lambda: self._set_listening(False)
            recognizer.on_error = lambda reason: self.notify(
                f"Speech recognition error: {reason}", severity="warning"
            )

        self.sub_title = getattr(self._companion.client, "model", "")
        self._monitor.start()
        self._start_camera()
        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    async def on_unmount(self) -> None:
        """Release the timer, the camera and the client on every exit path."""
        self._monitor.stop()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._stream is not None:
            self._stream.release()
            self._stream = None
        with contextlib.suppress(RuntimeError):
            await self._companion.close()

    def _on_append(self, message: Message) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).add_message(message)

    def _set_listening(self, listening: bool) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).set_listening(listening)

    @work(exclusive=True, group="camera")
    async def _start_camera(self) -> None:
        status = self.query_one("#camera-status", CameraStatus)
        if self._camera is None:
            status.set_live(False, "disabled")
            return
        self._stream = await acquire_camera(self._camera)
        if self._stream is None:
            status.set_live(False, "unavailable")
        else:
            status.set_live(True)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle typed input."""
        self._send(event.value)

    def on_chat_input_bar_speak_pressed(self, event: ChatInputBar.SpeakPressed) -> None:
        self.action_speak()

    @work(group="send")
    async def _send(self, text: str) -> None:
        # Not exclusive: overlapping sends must both complete
        await self._companion.send(text)

    def action_speak(self) -> None:
        """Start one speech recognition attempt."""
        if self._companion.recognizer is None:
            self.notify("Speech recognition is not available", severity="warning")
            return
        self._companion.listen()

    def action_copy_last_response(self) -> None:
        """Copy last teddy message to clipboard."""
        chat = self.query_one("#chat-history", ChatHistoryWidget)
        response = chat.get_last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    companion: TeddyCompanion,
    idle_window: float = DEFAULT_IDLE_WINDOW,
    camera: Camera | None = None,
) -> None:
    """Run the Textual TUI.

    Args:
        companion: Conversation to drive
        idle_window: Seconds of silence before a proactive message
        camera: Optional camera for the preview status
    """
    app = TeddyApp(companion=companion, idle_window=idle_window, camera=camera)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass

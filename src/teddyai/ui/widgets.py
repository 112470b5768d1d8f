"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Chat message rendering
- Input bar with Send and Speak buttons
- Camera status display
"""

from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message as TextualMessage
from textual.widgets import Button, Input, Static

from ..session import Message, Origin

SPEAK_LABEL = "Speak"
LISTENING_LABEL = "Listening..."


class ChatHistoryWidget(VerticalScroll):
    """Scrollable transcript view."""

    BORDER_TITLE = "TeddyAI"
    BORDER_SUBTITLE = "Teddy Bear Companion"
    ALLOW_SELECT = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._messages: list[Message] = []

    @property
    def message_count(self) -> int:
        return len(self._messages)

    def add_message(self, message: Message) -> None:
        """Render one transcript entry and scroll to it."""
        self._messages.append(message)
        self._render_message(message)
        self.border_subtitle = f"{len(self._messages)} messages"
        self.scroll_end(animate=False)

    def get_last_response(self) -> str | None:
        """Get the last teddy message."""
        for message in reversed(self._messages):
            if message.origin is Origin.ASSISTANT:
                return message.text
        return None

    def _render_message(self, message: Message) -> None:
        if message.origin is Origin.USER:
            prefix, css_class, icon = "You", "user-message", ">"
        else:
            prefix, css_class, icon = "Teddy", "assistant-message", "<"

        timestamp = message.created_at.strftime("%H:%M:%S")
        container = Vertical(classes=f"chat-message {css_class}")
        container.compose_add_child(Static(f"{icon} {prefix} [{timestamp}]", classes="message-header", markup=False))
        container.compose_add_child(Static(message.text, classes="message-content", markup=False))
        self.mount(container)


class ChatInputBar(Horizontal):
    """Text input with Send and (optionally) Speak buttons."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class SpeakPressed(TextualMessage):
        """Message sent when the Speak button is pressed."""

    def __init__(self, *args, show_speak: bool = False, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._show_speak = show_speak

    def compose(self):
        yield Input(placeholder="Type your message...", id="chat-input")
        yield Button("Send", id="send-btn", variant="success")
        if self._show_speak:
            yield Button(SPEAK_LABEL, id="speak-btn", variant="primary")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._submit()
        elif event.button.id == "speak-btn":
            self.post_message(self.SpeakPressed())

    def set_listening(self, listening: bool) -> None:
        """Reflect the recognizer state on the Speak button."""
        if not self._show_speak:
            return
        button = self.query_one("#speak-btn", Button)
        button.label = LISTENING_LABEL if listening else SPEAK_LABEL
        button.disabled = listening
        button.set_class(listening, "-listening")

    def _submit(self) -> None:
        text_input = self.query_one("#chat-input", Input)
        value = text_input.value
        text_input.value = ""
        if value.strip():
            self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", Input).focus()


class CameraStatus(Static):
    """One-line camera indicator."""

    def set_live(self, live: bool, detail: str = "") -> None:
        text = "Camera: on" if live else "Camera: off"
        if detail:
            text += f" ({detail})"
        self.update(text)
        self.set_class(live, "-live")

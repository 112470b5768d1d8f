"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Single column: camera status on top, conversation in the middle,
input bar at the bottom.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* Camera status line */
#camera-status {
    height: 1;
    padding: 0 1;
    color: $text-muted;

    &.-live {
        color: $success;
    }
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary-lighten-1;
    }
}

.chat-message {
    width: 100%;
    height: auto;
    margin: 0 0 1 0;
    padding: 0 2;
    background: transparent;
}

/* User messages - green accent */
.user-message {
    border-left: tall $success;
    background: $success 8%;

    & .message-header {
        color: $success;
        text-style: bold;
    }
}

/* Teddy messages - mauve accent */
.assistant-message {
    border-left: tall $secondary;
    background: $secondary 8%;

    & .message-header {
        color: $secondary;
        text-style: bold;
    }
}

.message-header {
    height: auto;
}

.message-content {
    height: auto;
    color: $foreground;
}

/* ============================================
   Input Bar
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    border: none;
    background: transparent;
}

#send-btn, #speak-btn {
    width: 14;
    margin: 0 0 0 1;
    text-style: bold;
}

#speak-btn.-listening {
    background: $warning;
    color: $background;
}
"""

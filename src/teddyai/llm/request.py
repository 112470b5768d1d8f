"""Builds the message array sent to the completion endpoint."""

from collections.abc import Iterable

from ..session import Message, Origin
from .models import ChatMessage


def to_chat_message(message: Message) -> ChatMessage:
    """Map a transcript entry to its wire role.

    User messages keep the ``user`` role; everything else the companion
    said is sent back as ``assistant``.
    """
    role = "user" if message.origin is Origin.USER else "assistant"
    return ChatMessage(role=role, content=message.text)


def build_request(system_prompt: str, transcript: Iterable[Message]) -> list[ChatMessage]:
    """Build the request messages for one completion call.

    The system prompt is always the single system message and always
    first. System-origin transcript entries are never forwarded.

    Args:
        system_prompt: Persona instructions
        transcript: Conversation so far, in arrival order

    Returns:
        ``[system, *history]``
    """
    messages = [ChatMessage(role="system", content=system_prompt)]
    messages.extend(
        to_chat_message(message)
        for message in transcript
        if message.origin is not Origin.SYSTEM
    )
    return messages

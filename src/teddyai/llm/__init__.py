from .base import CompletionClient
from .factory import create_completion_client
from .models import (
    ChatMessage,
    CompletionResult,
    EmptyChoice,
    HttpError,
    NetworkError,
    Success,
)
from .providers import OpenAIClient, OpenRouterClient
from .request import build_request, to_chat_message

__all__ = [
    "ChatMessage",
    "CompletionClient",
    "CompletionResult",
    "EmptyChoice",
    "HttpError",
    "NetworkError",
    "OpenAIClient",
    "OpenRouterClient",
    "Success",
    "build_request",
    "create_completion_client",
    "to_chat_message",
]

"""TeddyAI: a conversational teddy bear companion.

This package follows Parnas's information hiding principles,
where each module hides a specific design decision.
"""

__version__ = "0.1.0"

from .companion import TeddyCompanion, result_to_text
from .engagement import EngagementMonitor
from .llm import (
    CompletionClient,
    CompletionResult,
    EmptyChoice,
    HttpError,
    NetworkError,
    Success,
    create_completion_client,
)
from .session import Message, Origin, Session

__all__ = [
    "CompletionClient",
    "CompletionResult",
    "EmptyChoice",
    "EngagementMonitor",
    "HttpError",
    "Message",
    "NetworkError",
    "Origin",
    "Session",
    "Success",
    "TeddyCompanion",
    "create_completion_client",
    "result_to_text",
]

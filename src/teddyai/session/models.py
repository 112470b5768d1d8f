"""Data models for the conversation transcript."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Origin(str, Enum):
    """Who produced a message."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Message(BaseModel):
    """A single transcript entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    origin: Origin = Field(description="Producer of the message")
    text: str = Field(description="Message text")
    created_at: datetime = Field(default_factory=datetime.now)

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(origin=Origin.USER, text=text)

    @classmethod
    def assistant(cls, text: str) -> "Message":
        return cls(origin=Origin.ASSISTANT, text=text)

    @classmethod
    def system(cls, text: str) -> "Message":
        return cls(origin=Origin.SYSTEM, text=text)

"""Data models for chat completion requests and results.

CompletionResult is a closed sum type: every call to a CompletionClient
yields exactly one of Success, EmptyChoice, HttpError or NetworkError.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """Represents a chat message in the wire format."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"] = Field(
        description="Role of the message sender: 'user', 'assistant', or 'system'"
    )
    content: str = Field(description="Content of the message")


class Success(BaseModel):
    """The endpoint returned at least one choice."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    text: str = Field(description="Content of the first choice")


class EmptyChoice(BaseModel):
    """The endpoint answered 2xx but with no usable choice."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty_choice"] = "empty_choice"


class HttpError(BaseModel):
    """The endpoint rejected the request with a non-2xx status."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["http_error"] = "http_error"
    status: int = Field(description="HTTP status code")
    body: str = Field(default="", description="Response body, verbatim")


class NetworkError(BaseModel):
    """The request never produced an HTTP response (DNS, TLS, timeout...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["network_error"] = "network_error"
    cause: str = Field(description="Description of the transport failure")


CompletionResult = Annotated[
    Success | EmptyChoice | HttpError | NetworkError,
    Field(discriminator="kind"),
]

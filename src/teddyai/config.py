"""Runtime configuration.

Settings come from environment variables (a ``.env`` file in the working
directory is loaded first). The completion API key is the only secret; it
is not validated locally.
"""

import logging
import os
from collections.abc import Mapping

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator
from rich.logging import RichHandler

from .engagement import DEFAULT_IDLE_WINDOW
from .exceptions import ConfigurationError
from .llm.providers.openai import DEFAULT_TIMEOUT
from .llm.providers.openrouter import DEFAULT_MODEL, DEFAULT_REFERER, DEFAULT_TITLE
from .speech import DEFAULT_LOCALE

# Environment variable -> settings field
ENV_VARS = {
    "OPENROUTER_API_KEY": "api_key",
    "TEDDY_PROVIDER": "provider",
    "TEDDY_MODEL": "model",
    "TEDDY_BASE_URL": "base_url",
    "TEDDY_IDLE_WINDOW": "idle_window",
    "TEDDY_REQUEST_TIMEOUT": "request_timeout",
    "TEDDY_LOCALE": "locale",
    "TEDDY_SPEAKER": "speaker",
    "TEDDY_RECOGNIZER": "recognizer",
    "TEDDY_VOSK_MODEL": "vosk_model",
    "TEDDY_CAMERA": "camera_index",
    "TEDDY_REFERER": "referer",
    "TEDDY_TITLE": "title",
    "TEDDY_LOG_LEVEL": "log_level",
}


class TeddySettings(BaseModel):
    """Effective settings for one companion process."""

    api_key: str | None = Field(default=None, description="Completion endpoint bearer token")
    provider: str = Field(default="openrouter", description="Completion provider")
    model: str = Field(default=DEFAULT_MODEL, description="Model identifier")
    base_url: str | None = Field(default=None, description="Override for the provider base URL")
    idle_window: float = Field(default=DEFAULT_IDLE_WINDOW, gt=0, description="Seconds of silence before a nudge")
    request_timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Completion request timeout (s)")
    locale: str = Field(default=DEFAULT_LOCALE, description="Speech locale")
    speaker: str = Field(default="silent", description="Text-to-speech backend")
    recognizer: str = Field(default="none", description="Speech-to-text backend (none, vosk)")
    vosk_model: str | None = Field(default=None, description="Directory of the Vosk model")
    camera_index: int | None = Field(default=None, ge=0, description="OpenCV device index, None for no camera")
    referer: str = Field(default=DEFAULT_REFERER, description="HTTP-Referer identification header")
    title: str = Field(default=DEFAULT_TITLE, description="X-Title identification header")
    log_level: str = Field(default="WARNING", description="Logging level name")

    @field_validator("api_key", "base_url", "camera_index", "vosk_model", mode="before")
    @classmethod
    def empty_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {v}")
        return level

    def client_config(self) -> dict:
        """Keyword arguments for create_completion_client()."""
        config = {
            "api_key": self.api_key,
            "model": self.model,
            "timeout": self.request_timeout,
            "referer": self.referer,
            "title": self.title,
        }
        if self.base_url:
            config["base_url"] = self.base_url
        return config

    def masked_api_key(self) -> str:
        if not self.api_key:
            return "(not set)"
        return f"{self.api_key[:6]}..." if len(self.api_key) > 10 else "***"


def load_settings(env: Mapping[str, str] | None = None, **overrides) -> TeddySettings:
    """Build settings from the environment.

    Args:
        env: Variables to read (defaults to os.environ after loading .env)
        **overrides: Field values that win over the environment; None
            values are ignored

    Raises:
        ConfigurationError: If a value fails validation
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    values = {field: env[var] for var, field in ENV_VARS.items() if var in env}
    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return TeddySettings(**values)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def configure_logging(level: str = "WARNING") -> None:
    """Route teddyai logs through rich at ``level``."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )

from typing import Any

from ..exceptions import ConfigurationError
from .base import CompletionClient
from .providers import OpenAIClient, OpenRouterClient


def create_completion_client(provider: str = "openrouter", **config: Any) -> CompletionClient:
    """Create a completion client instance.

    This factory function hides the instantiation logic for different providers.

    Args:
        provider: Provider type ('openrouter', 'openai')
        **config: Provider-specific configuration
            For OpenRouter:
                - api_key: str | None (required key, may be None)
                - model: str (default: 'openchat/openchat-7b:free')
                - base_url: str | None
                - timeout: float (default: 30.0)
                - referer: str, title: str
            For OpenAI:
                - api_key: str | None (required key, may be None)
                - model: str (default: 'gpt-4o-mini')
                - base_url: str | None
                - timeout: float (default: 30.0)

    Returns:
        Initialized completion client

    Raises:
        ConfigurationError: If provider type is not supported
        TypeError: If required configuration is missing

    Examples:
        >>> client = create_completion_client(
        ...     "openrouter",
        ...     api_key="sk-or-...",
        ...     model="openchat/openchat-7b:free"
        ... )
    """
    provider_lower = provider.lower()

    if provider_lower == "openrouter":
        if "api_key" not in config:
            raise TypeError("OpenRouter provider requires 'api_key' in config")
        return OpenRouterClient(**config)

    if provider_lower == "openai":
        if "api_key" not in config:
            raise TypeError("OpenAI provider requires 'api_key' in config")
        # Product identification headers are OpenRouter specific
        config.pop("referer", None)
        config.pop("title", None)
        return OpenAIClient(**config)

    raise ConfigurationError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'openrouter', 'openai'"
    )

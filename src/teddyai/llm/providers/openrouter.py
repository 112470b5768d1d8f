from typing import Any

from .openai import DEFAULT_TIMEOUT, OpenAIClient

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
DEFAULT_MODEL = "openchat/openchat-7b:free"
DEFAULT_REFERER = "https://video-ai-chatbot.com"
DEFAULT_TITLE = "TeddyAI"


class OpenRouterClient(OpenAIClient):
    """OpenRouter completion client using the OpenAI-compatible API.

    Hidden design decisions:
    - OpenRouter base URL
    - Product identification headers (HTTP-Referer, X-Title)
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        referer: str = DEFAULT_REFERER,
        title: str = DEFAULT_TITLE,
        system_prompt: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenRouter client.

        Args:
            api_key: OpenRouter API key
            model: Model to use (default: openchat/openchat-7b:free)
            base_url: API base URL (default: https://openrouter.ai/api/v1)
            timeout: Request timeout in seconds
            referer: Value of the HTTP-Referer identification header
            title: Value of the X-Title identification header
            system_prompt: Persona prompt (defaults to the packaged prompt)
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        super().__init__(
            api_key=api_key,
            model=model,
            base_url=base_url or OPENROUTER_BASE_URL,
            timeout=timeout,
            default_headers={"HTTP-Referer": referer, "X-Title": title},
            system_prompt=system_prompt,
            **client_kwargs
        )

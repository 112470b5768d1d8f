from .openai import OpenAIClient
from .openrouter import OpenRouterClient

__all__ = ["OpenAIClient", "OpenRouterClient"]

"""Prompt management module.

Externalizes the companion's fixed texts to files for easy customization.
Prompts can be overridden by placing files in the working directory.
"""

from functools import lru_cache
from pathlib import Path

_PROMPTS_DIR = Path(__file__).parent

# Texts appended to the transcript when a completion fails
EMPTY_CHOICE_TEXT = "The AI didn't provide a response. Please try again."
HTTP_ERROR_LABEL = "OpenRouter API Error"
NETWORK_ERROR_TEXT = (
    "Failed to get a response from the AI. There might be an issue with the "
    "OpenRouter API. Please try again later."
)


@lru_cache(maxsize=16)
def load_prompt(name: str) -> str:
    """Load a prompt from file.

    Search order:
    1. Current working directory: ./prompts/{name}.txt
    2. Package prompts directory: teddyai/prompts/{name}.txt

    Args:
        name: Prompt name (without .txt extension)

    Returns:
        Prompt text content, stripped of surrounding whitespace

    Raises:
        FileNotFoundError: If prompt file not found in any location
    """
    filename = f"{name}.txt"

    local_path = Path.cwd() / "prompts" / filename
    if local_path.exists():
        return local_path.read_text(encoding="utf-8").strip()

    package_path = _PROMPTS_DIR / filename
    if package_path.exists():
        return package_path.read_text(encoding="utf-8").strip()

    raise FileNotFoundError(
        f"Prompt '{name}' not found. Searched:\n"
        f"  - {local_path}\n"
        f"  - {package_path}"
    )


def get_system_prompt() -> str:
    """Get the teddy bear persona sent first in every request."""
    return load_prompt("system")


def get_proactive_prompt() -> str:
    """Get the canned message used to re-engage a silent user."""
    return load_prompt("proactive")


def clear_cache() -> None:
    """Clear the prompt cache (useful after modifying prompt files)."""
    load_prompt.cache_clear()


__all__ = [
    "EMPTY_CHOICE_TEXT",
    "HTTP_ERROR_LABEL",
    "NETWORK_ERROR_TEXT",
    "clear_cache",
    "get_proactive_prompt",
    "get_system_prompt",
    "load_prompt",
]

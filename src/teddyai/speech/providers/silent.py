import logging

from ..base import Speaker

logger = logging.getLogger(__name__)


class SilentSpeaker(Speaker):
    """Speaker that only records what it would have said."""

    def __init__(self, locale: str = "en-US") -> None:
        super().__init__(locale=locale)
        self.spoken: list[str] = []

    def speak(self, text: str, locale: str | None = None) -> None:
        self.spoken.append(text)
        logger.debug("Speak [%s]: %s", locale or self._locale, text)

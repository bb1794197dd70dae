"""Effective langcode selection."""

from src.domain.enums import LangcodeFallback
from src.domain.protocols import LanguageManager
from src.domain.value_objects import FrontendConfig


class LangcodeSelector:
    """Pick the language of a request.

    An explicit langcode always wins. Otherwise the configured fallback
    picks the site default or the negotiated content language.
    """

    def __init__(self, config: FrontendConfig, languages: LanguageManager) -> None:
        self._config = config
        self._languages = languages

    def effective(self, requested: str | None) -> str:
        if requested:
            return requested
        if self._config.langcode_fallback == LangcodeFallback.CURRENT:
            return self._languages.current_content_langcode()
        return self._languages.default_langcode()

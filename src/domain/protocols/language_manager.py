"""LanguageManager protocol."""

from typing import Protocol


class LanguageManager(Protocol):
    """Site language protocol (port)."""

    def default_langcode(self) -> str:
        """Site default language."""
        ...

    def current_content_langcode(self) -> str:
        """Negotiated content language of the current request."""
        ...

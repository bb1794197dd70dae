"""Site languages and Accept-Language negotiation.

The negotiated content language lives in a ContextVar set per request by
LanguageNegotiationMiddleware.
"""

from contextvars import ContextVar, Token

_negotiated_langcode: ContextVar[str | None] = ContextVar(
    "negotiated_langcode", default=None
)


class ContextVarLanguageManager:
    """LanguageManager over a fixed list of site languages.

    Args:
        default_langcode: Site default language.
        langcodes: Supported languages; the default is always included.
    """

    def __init__(self, default_langcode: str = "en", langcodes: list[str] | None = None) -> None:
        self._default = default_langcode
        self._langcodes = list(dict.fromkeys([default_langcode, *(langcodes or [])]))

    @property
    def langcodes(self) -> list[str]:
        return list(self._langcodes)

    def default_langcode(self) -> str:
        return self._default

    def current_content_langcode(self) -> str:
        return _negotiated_langcode.get() or self._default

    def negotiate(self, accept_language: str | None) -> str:
        """Pick the best supported language from an Accept-Language header.

        Args:
            accept_language: Raw header value, e.g. "fr-CA,fr;q=0.8,en;q=0.5".

        Returns:
            Best supported langcode, or the site default.
        """
        for tag in _ranked_tags(accept_language or ""):
            for candidate in (tag, tag.split("-", 1)[0]):
                if candidate in self._langcodes:
                    return candidate
        return self._default

    def set_current(self, langcode: str | None) -> Token[str | None]:
        """Set the negotiated language for the current context."""
        return _negotiated_langcode.set(langcode)

    def reset_current(self, token: Token[str | None]) -> None:
        _negotiated_langcode.reset(token)


def _ranked_tags(header: str) -> list[str]:
    ranked: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0
        if quality > 0:
            ranked.append((-quality, position, tag))
    return [tag for _, _, tag in sorted(ranked)]

"""Redirect layer.

First-pass lookup against the optional redirect collaborator. Lookups are
best-effort: a missing collaborator, a raised exception or a malformed
record all mean "no redirect".
"""

import re

from src.core.constants import DEFAULT_REDIRECT_STATUS
from src.domain.entities import RedirectMatch
from src.domain.protocols import LoggerProtocol, RedirectLookup
from src.domain.value_objects import RedirectTarget

_ABSOLUTE_URL = re.compile(r"^[a-z][a-z0-9+\-.]*://", re.IGNORECASE)


class RedirectService:
    """Look up and sanitize redirects.

    Dependencies (injected via constructor):
        - RedirectLookup | None: Redirect table, None when not installed
        - LoggerProtocol: Logs swallowed lookup failures
    """

    def __init__(self, lookup: RedirectLookup | None, logger: LoggerProtocol) -> None:
        self._lookup = lookup
        self._logger = logger

    async def try_redirect(
        self, path: str, query: dict[str, str], langcode: str
    ) -> RedirectTarget | None:
        """Find a redirect for a normalized path.

        Args:
            path: Normalized source path.
            query: Query parameters split off the requested path.
            langcode: Effective language.

        Returns:
            Sanitized redirect target, or None when nothing usable matched.
        """
        if self._lookup is None:
            return None

        try:
            match = await self._lookup.find_matching_redirect(path, query, langcode)
        except Exception as e:
            self._logger.warning(
                "Redirect lookup failed",
                path=path[:256],
                error_type=type(e).__name__,
            )
            return None

        if not isinstance(match, RedirectMatch):
            return None

        to = sanitize_redirect_target(match.to)
        if to is None:
            return None
        return RedirectTarget(to=to, status=clamp_redirect_status(match.status_code))


def clamp_redirect_status(raw: object) -> int:
    """Coerce a stored status to a 3xx code.

    Args:
        raw: int or digit string; anything else is ignored.

    Returns:
        The status if it is within 300-399, DEFAULT_REDIRECT_STATUS otherwise.
    """
    status = DEFAULT_REDIRECT_STATUS
    if isinstance(raw, int) and not isinstance(raw, bool):
        status = raw
    elif isinstance(raw, str) and raw.isdigit():
        status = int(raw)

    if status < 300 or status > 399:
        return DEFAULT_REDIRECT_STATUS
    return status


def sanitize_redirect_target(raw: object) -> str | None:
    """Force a target to an absolute URL or a path with a leading slash.

    Returns:
        Cleaned target, or None if it is not a non-blank string.
    """
    if not isinstance(raw, str) or raw.strip() == "":
        return None

    to = raw.strip()
    if not _ABSOLUTE_URL.match(to) and not to.startswith("/"):
        to = "/" + to
    return to
